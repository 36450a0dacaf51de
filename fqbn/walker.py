from __future__ import annotations
import os
from typing import Optional

from .boards_txt import namespace_for, parse_file
from .config import SETTINGS
from .errors import FileSystemError
from .index import BoardIndex


def _raise_walk_error(err: OSError) -> None:
    raise FileSystemError.wrap(err) from err


def discover_and_parse(
    root: str,
    index: BoardIndex,
    file_name: Optional[str] = None,
    verbose: Optional[bool] = None,
) -> int:
    """Parse every definition file under ``root`` into ``index``.

    The first traversal or parse error aborts the walk; records committed
    before it stay in the index. Returns the number of files parsed.
    """
    file_name = file_name or SETTINGS.boards_file
    verbose = SETTINGS.verbose if verbose is None else verbose
    parsed = 0
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for fname in sorted(filenames):
            if fname != file_name:
                continue
            full = os.path.join(dirpath, fname)
            if not os.path.isfile(full):
                continue
            namespace = namespace_for(full, root)
            records = parse_file(full, index, namespace)
            parsed += 1
            if verbose:
                print(f"[boards] parsed: {full} (namespace={namespace or '-'}, boards={len(records)})")
    return parsed
