from __future__ import annotations


class FqbnError(Exception):
    """Base class for board lookup failures."""


class FileSystemError(OSError):
    """Directory traversal or definition file read failure.

    Keeps errno/strerror/filename of the underlying OSError, which is
    chained as ``__cause__``.
    """

    @classmethod
    def wrap(cls, err: OSError, path: str | None = None) -> "FileSystemError":
        filename = err.filename if err.filename is not None else path
        if err.errno is None:
            return cls(str(err) or f"i/o error: {filename}")
        return cls(err.errno, err.strerror, filename)


class IndexEmptyError(FqbnError, LookupError):
    def __init__(self, message: str = "There are no cached board details, call load() first"):
        super().__init__(message)


class NotFoundError(FqbnError, LookupError):
    def __init__(self, vid: str, pid: str):
        self.vid = vid
        self.pid = pid
        super().__init__(f"There is no board that matches vid={vid} pid={pid}")
