from __future__ import annotations

from pathlib import Path
from typing import Union

class FsplitError(Exception):
    def __init__(self, path: Union[str, Path], message: str) -> None:
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")

class ParseError(FsplitError):
    pass

class WriteError(FsplitError):
    pass

class FormatError(FsplitError):
    # Raised by formatters; callers re-raise it as WriteError.
    pass

class NameCollisionError(FsplitError):
    pass
