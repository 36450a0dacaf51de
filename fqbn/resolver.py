from __future__ import annotations
from typing import Optional

from .config import SETTINGS
from .index import BoardIndex
from .walker import discover_and_parse


def load(
    root: str,
    index: Optional[BoardIndex] = None,
    file_name: Optional[str] = None,
    verbose: Optional[bool] = None,
) -> BoardIndex:
    """Walk ``root`` and return the index holding every board found.

    Pass an existing ``index`` to add a second tree to it.
    """
    if index is None:
        index = BoardIndex()
    verbose = SETTINGS.verbose if verbose is None else verbose
    files = discover_and_parse(root, index, file_name=file_name, verbose=verbose)
    if verbose:
        print(f"[boards] loaded {len(index)} boards from {files} file(s) under {root}")
    return index


def resolve(index: BoardIndex, vid: str, pid: str) -> str:
    return index.lookup(vid, pid)
