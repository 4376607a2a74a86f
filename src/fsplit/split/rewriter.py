from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import FsplitError
from ..formatter import Formatter
from ..source_index.comments import is_comment_kept
from ..source_index.loader import load_package_dir
from ..types import DeclKind, Declaration, SourceUnit
from .eligibility import is_target
from .materializer import write_formatted

_WS = b" \t\r\n"

def _is_removed(d: Declaration) -> bool:
    return d.kind == DeclKind.FUNCTION

def removal_spans(unit: SourceUnit) -> List[Tuple[int, int]]:
    spans = [(d.text_start, d.span.end) for d in unit.declarations if _is_removed(d)]
    for c in unit.comments:
        if not is_comment_kept(c, unit.declarations, _is_removed):
            spans.append((c.span.start, c.span.end))
    spans.sort()

    merged: List[Tuple[int, int]] = []
    for s, e in spans:
        if merged and s <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], e))
        else:
            merged.append((s, e))
    return merged

def render_without_functions(unit: SourceUnit) -> str:
    # Kept bytes are copied verbatim; only whitespace at the cut points is normalized.
    pieces: List[bytes] = []
    pos = 0
    for s, e in removal_spans(unit):
        pieces.append(unit.source[pos:s])
        pos = e
    pieces.append(unit.source[pos:])

    out = pieces[0].rstrip(_WS)
    for piece in pieces[1:]:
        piece = piece.strip(_WS)
        if piece:
            out += b"\n\n" + piece
    return out.decode("utf-8") + "\n"

def rewrite_file(unit: SourceUnit, formatter: Formatter) -> None:
    write_formatted(str(unit.path), render_without_functions(unit), formatter)

def remove_functions(package_path: Path, formatter: Formatter) -> List[str]:
    # Second, independent parse. A failing file does not stop the others;
    # the first error is raised once every file was attempted.
    pkgs = load_package_dir(package_path)

    rewritten: List[str] = []
    first_err: Optional[FsplitError] = None
    for units in pkgs.values():
        for unit in units:
            if not is_target(unit):
                continue
            try:
                rewrite_file(unit, formatter)
            except FsplitError as e:
                if first_err is None:
                    first_err = e
                continue
            rewritten.append(str(unit.path))

    if first_err is not None:
        raise first_err
    return rewritten
