from __future__ import annotations
from functools import lru_cache
from .config import settings
from .services.retriever import FileRetriever


@lru_cache(maxsize=1)
def get_retriever() -> FileRetriever:
    return FileRetriever(settings.base_dir)


def get_chunk_size() -> int:
    return settings.chunk_size
