from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

class DeclKind(str, Enum):
    IMPORT = "IMPORT"
    FUNCTION = "FUNCTION"    # plain functions and methods
    OTHER = "OTHER"          # type / var / const

@dataclass(frozen=True)
class Span:
    start: int               # byte offset, inclusive
    end: int                 # byte offset, exclusive
    line: int = 1            # 1-based line of start

    def contains(self, offset: int) -> bool:
        # strict on both ends
        return self.start < offset < self.end

@dataclass
class CommentBlock:
    span: Span
    text: str

@dataclass
class Declaration:
    kind: DeclKind
    span: Span
    name: str = ""
    receiver: str = ""
    doc: Optional[CommentBlock] = None

    @property
    def text_start(self) -> int:
        return self.doc.span.start if self.doc is not None else self.span.start

@dataclass
class SourceUnit:
    path: Path
    package: str
    source: bytes
    declarations: List[Declaration] = field(default_factory=list)
    comments: List[CommentBlock] = field(default_factory=list)

    def slice(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")

    def functions(self) -> List[Declaration]:
        return [d for d in self.declarations if d.kind == DeclKind.FUNCTION]

@dataclass
class ExtractedFunction:
    file_name: str           # output path
    package: str             # header: leading comments + package clause
    imports: str
    func: str                # doc comment + declaration
    source_path: str = ""
    name: str = ""           # "<receiver>.<function>" for reporting

@dataclass
class SplitReport:
    package_path: str
    written: List[str] = field(default_factory=list)
    rewritten: List[str] = field(default_factory=list)
    skipped: Dict[str, str] = field(default_factory=dict)   # path -> exclusion reason
