from __future__ import annotations
from typing import AsyncIterator
from urllib.parse import quote
from fastapi.responses import StreamingResponse
from starlette.concurrency import run_in_threadpool
from starlette.types import Receive, Scope, Send
from .services.retriever import DEFAULT_CHUNK_SIZE, FileStream
from .utils.logging import logger


def content_disposition(file_name: str) -> str:
    escaped = file_name.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("latin-1")
    except UnicodeEncodeError:
        # Header values must be latin-1; fall back to RFC 5987 encoding
        fallback = escaped.encode("ascii", "replace").decode("ascii")
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(file_name)}"
    return f'attachment; filename="{escaped}"'


class FileStreamResponse(StreamingResponse):
    """Chunked attachment response that owns a FileStream.

    The file handle is closed once the response is done with it: after the
    last chunk, on client disconnect, or when sending fails.
    """

    def __init__(self, stream: FileStream, chunk_size: int = DEFAULT_CHUNK_SIZE, status_code: int = 200):
        self.file_stream = stream
        self.chunk_size = chunk_size
        headers = {
            "Transfer-Encoding": "chunked",
            "Content-Disposition": content_disposition(stream.file_name),
            "Cache-Control": "no-cache",
            # Set directly so text types are not given a charset suffix
            "Content-Type": stream.content_type,
        }
        super().__init__(self._body(), status_code=status_code, headers=headers)

    async def _body(self) -> AsyncIterator[bytes]:
        try:
            while True:
                chunk = await run_in_threadpool(self.file_stream.read_chunk, self.chunk_size)
                if not chunk:
                    break
                yield chunk
        except OSError as e:
            logger.error(f"Error while streaming {self.file_stream.file_name}: {e}")
            raise
        finally:
            self.file_stream.close()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            self.file_stream.close()
