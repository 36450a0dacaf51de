from __future__ import annotations
import os
import re
from dataclasses import dataclass
from typing import Dict, List, Union

from .errors import FileSystemError
from .index import BoardIndex, BoardRecord

# <key>.vid.<n>=0x<4 hex> / <key>.pid.<n>=0x<4 hex>
_VID_RE = re.compile(r"^(?P<key>[A-Za-z0-9_\-]+)\.vid\.[0-9]=(?P<value>0x[0-9A-Fa-f]{4})$")
_PID_RE = re.compile(r"^(?P<key>[A-Za-z0-9_\-]+)\.pid\.[0-9]=(?P<value>0x[0-9A-Fa-f]{4})$")


@dataclass(frozen=True)
class VendorDecl:
    key: str
    value: str


@dataclass(frozen=True)
class ProductDecl:
    key: str
    value: str


class Other:
    def __repr__(self) -> str:
        return "OTHER"


OTHER = Other()

LineDecl = Union[VendorDecl, ProductDecl, Other]


def classify_line(line: str) -> LineDecl:
    s = line.rstrip()
    m = _VID_RE.match(s)
    if m:
        return VendorDecl(m.group("key"), m.group("value"))
    m = _PID_RE.match(s)
    if m:
        return ProductDecl(m.group("key"), m.group("value"))
    return OTHER


def namespace_for(path: str, root: str) -> str:
    """Parent directory of ``path`` relative to ``root``, joined with ':'.

    hardware/arduino/avr/boards.txt under root ``hardware`` -> ``arduino:avr``.
    A file sitting directly in ``root`` gets the empty namespace.
    """
    rel = os.path.relpath(os.path.dirname(os.path.abspath(path)), os.path.abspath(root))
    parts = [p for p in rel.split(os.sep) if p and p != os.curdir]
    return ":".join(parts)


def qualified_name(namespace: str, key: str) -> str:
    if not namespace:
        return key
    return f"{namespace}:{key}"


def _commit(index: BoardIndex, record: BoardRecord) -> None:
    if record.name:
        index.put(record.name, record)


def parse_file(path: str, index: BoardIndex, namespace: str = "") -> List[BoardRecord]:
    """Parse one definition file into ``index``.

    A change of board name between declaration lines commits the record
    being built. Declarations for a board seen earlier in the same file go
    back onto that board's record. The last record is committed at EOF.
    """
    started: Dict[str, BoardRecord] = {}
    current = BoardRecord()
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                decl = classify_line(line)
                if isinstance(decl, Other):
                    continue
                name = qualified_name(namespace, decl.key)
                if current.name != name:
                    _commit(index, current)
                    current = started.get(name) or BoardRecord(name=name, source=path)
                    started[name] = current
                if isinstance(decl, VendorDecl):
                    current.vids.add(decl.value)
                else:
                    current.pids.add(decl.value)
    except OSError as e:
        raise FileSystemError.wrap(e, path) from e
    _commit(index, current)
    return list(started.values())
