from __future__ import annotations
from fastapi import Depends, HTTPException, Query
from ..deps import get_chunk_size, get_retriever
from ..responses import FileStreamResponse
from ..services.errors import ErrorKind, RetrievalError
from ..services.retriever import FileRetriever


STATUS_FOR_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_PATH: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.IO_FAILURE: 500,
}

RESPONSES = {
    200: {"description": "File downloaded successfully"},
    400: {"description": "Invalid file path"},
    404: {"description": "File not found"},
    500: {"description": "Internal server error"},
}


def get_my_file(
    file_path: str = Query(
        ...,
        description="Relative path to the file to retrieve from the server",
        examples=["documents/example.txt"],
    ),
    retriever: FileRetriever = Depends(get_retriever),
    chunk_size: int = Depends(get_chunk_size),
):
    """Fetch a file from the host filesystem and stream it back to the client with chunked transfer encoding"""
    try:
        stream = retriever.retrieve(file_path)
    except RetrievalError as e:
        raise HTTPException(status_code=STATUS_FOR_KIND[e.kind], detail=e.message) from e
    return FileStreamResponse(stream, chunk_size=chunk_size)
