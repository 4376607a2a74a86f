from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from ..types import CommentBlock, Declaration, Span

def group_comments(source: bytes, raw: Sequence[Tuple[int, int, int]]) -> List[CommentBlock]:
    # raw: (start_byte, end_byte, line) of every comment, in source order.
    # Adjacent comments separated by whitespace with at most one newline form one block.
    # A comment trailing code on its line closes at the end of that line.
    blocks: List[CommentBlock] = []
    cur: Optional[List[int]] = None
    cur_trailing = False
    for start, end, line in raw:
        if cur is not None:
            gap = source[cur[1]:start]
            if gap.strip() == b"":
                newlines = gap.count(b"\n")
                if newlines == 0 or (newlines == 1 and not cur_trailing and _starts_line(source, start)):
                    cur[1] = end
                    continue
            blocks.append(_block(source, cur))
        cur = [start, end, line]
        cur_trailing = not _starts_line(source, start)
    if cur is not None:
        blocks.append(_block(source, cur))
    return blocks

def _block(source: bytes, cur: List[int]) -> CommentBlock:
    start, end, line = cur
    return CommentBlock(span=Span(start, end, line), text=source[start:end].decode("utf-8"))

def _starts_line(source: bytes, offset: int) -> bool:
    line_start = source.rfind(b"\n", 0, offset) + 1
    return source[line_start:offset].strip() == b""

def find_doc_comment(source: bytes, blocks: Sequence[CommentBlock], decl_start: int) -> Optional[CommentBlock]:
    # The doc comment ends on the line right before the declaration and is not
    # a trailing comment of some earlier token.
    best: Optional[CommentBlock] = None
    for b in blocks:
        if b.span.end > decl_start:
            break
        best = b
    if best is None:
        return None
    gap = source[best.span.end:decl_start]
    if gap.strip() != b"" or gap.count(b"\n") != 1:
        return None
    if not _starts_line(source, best.span.start):
        return None
    return best

def associated_declarations(block: CommentBlock, declarations: Sequence[Declaration]) -> List[Declaration]:
    return [d for d in declarations if d.doc is block or d.span.contains(block.span.start)]

def is_comment_kept(
    block: CommentBlock,
    declarations: Sequence[Declaration],
    removed: Callable[[Declaration], bool],
) -> bool:
    owners = associated_declarations(block, declarations)
    if not owners:
        # file-level comment, or between declarations
        return True
    return any(not removed(d) for d in owners)
