from __future__ import annotations

from .errors import FileSystemError, FqbnError, IndexEmptyError, NotFoundError
from .index import BoardIndex, BoardRecord
from .resolver import load, resolve

__all__ = [
    "BoardIndex",
    "BoardRecord",
    "FileSystemError",
    "FqbnError",
    "IndexEmptyError",
    "NotFoundError",
    "load",
    "resolve",
]
