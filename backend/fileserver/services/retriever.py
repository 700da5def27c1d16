from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator
from .content_types import content_type_for
from .errors import InvalidPath, IOFailure, NotFound
from ..utils.logging import logger


DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class FileStream:
    """An open read-only file plus the metadata needed to send it.

    The stream owns ``handle`` until ``close()`` is called. Iterating with
    ``iter_chunks`` closes it once the iteration stops, however it stops.
    """

    handle: BinaryIO
    content_type: str
    file_name: str
    size: int
    _closed: bool = field(default=False, init=False, repr=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.handle.close()

    def read_chunk(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
        return self.handle.read(chunk_size)

    def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        try:
            while True:
                chunk = self.handle.read(chunk_size)
                if not chunk:
                    break
                yield chunk
        finally:
            self.close()

    def __enter__(self) -> FileStream:
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def is_safe_relative_path(path: str) -> bool:
    if ".." in path or path.startswith("/"):
        return False
    # Windows separators and NUL bytes never reach the filesystem
    if "\\" in path or "\x00" in path:
        return False
    return True


class FileRetriever:
    def __init__(self, base_dir: str):
        self.base_dir = os.path.realpath(base_dir)

    def _within_base(self, resolved: str) -> bool:
        real = os.path.realpath(resolved)
        return real == self.base_dir or real.startswith(self.base_dir.rstrip(os.sep) + os.sep)

    def retrieve(self, path: str) -> FileStream:
        if not is_safe_relative_path(path):
            logger.info("Rejected file path %r", path)
            raise InvalidPath("Invalid file path")

        resolved = os.path.join(self.base_dir, path)
        if not self._within_base(resolved):
            logger.warning("File path %r resolves outside %s", path, self.base_dir)
            raise InvalidPath("Invalid file path")

        if not os.path.exists(resolved):
            logger.info("File not found: %s", resolved)
            raise NotFound("File not found")
        if not os.path.isfile(resolved):
            logger.info("Not a regular file: %s", resolved)
            raise InvalidPath("Path is not a file")

        file_name = os.path.basename(resolved)
        content_type = content_type_for(file_name)
        try:
            handle = open(resolved, "rb")
        except OSError as e:
            logger.warning(f"Failed to open {resolved}: {e}")
            raise IOFailure(f"Error processing file: {e}") from e
        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError as e:
            handle.close()
            raise IOFailure(f"Error processing file: {e}") from e

        logger.debug("Serving %s as %s (%d bytes)", resolved, content_type, size)
        return FileStream(handle=handle, content_type=content_type, file_name=file_name, size=size)
