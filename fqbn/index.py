from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

from .errors import IndexEmptyError, NotFoundError


@dataclass
class BoardRecord:
    name: str = ""
    vids: Set[str] = field(default_factory=set)
    pids: Set[str] = field(default_factory=set)
    source: str = ""

    def matches(self, vid: str, pid: str) -> bool:
        return pid in self.pids and vid in self.vids


class BoardIndex:
    """Board name -> BoardRecord, kept in load order.

    ``put`` replaces any record already stored under the same name, so a
    later definition file wins over an earlier one.
    """

    def __init__(self) -> None:
        self._records: Dict[str, BoardRecord] = {}

    def put(self, name: str, record: BoardRecord) -> None:
        self._records[name] = record

    def get(self, name: str) -> Optional[BoardRecord]:
        return self._records.get(name)

    def names(self) -> List[str]:
        return list(self._records.keys())

    def lookup(self, vid: str, pid: str) -> str:
        if not self._records:
            raise IndexEmptyError()
        # Linear scan is fine for a few hundred boards.
        for name, record in self._records.items():
            if record.matches(vid, pid):
                return name
        raise NotFoundError(vid, pid)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[BoardRecord]:
        return iter(list(self._records.values()))
