from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..config import SOURCE_EXT
from ..errors import ParseError
from ..types import DeclKind, Declaration, SourceUnit, Span
from .comments import find_doc_comment, group_comments

_KIND_BY_NODE = {
    "import_declaration": DeclKind.IMPORT,
    "function_declaration": DeclKind.FUNCTION,
    "method_declaration": DeclKind.FUNCTION,
}

@lru_cache(maxsize=1)
def _go_parser() -> Parser:
    return Parser(Language(tree_sitter_go.language()))

def scan_go_files(package_dir: Path) -> List[Path]:
    if not package_dir.is_dir():
        raise ParseError(package_dir, "not a directory")
    out: List[Path] = []
    for p in sorted(package_dir.iterdir()):
        if p.suffix == SOURCE_EXT and p.is_file():
            out.append(p)
    return out

def _node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""

def _first_error(node: Node) -> Optional[Node]:
    stack = [node]
    while stack:
        n = stack.pop()
        if n.type == "ERROR" or n.is_missing:
            return n
        if n.has_error:
            stack.extend(reversed(n.children))
    return None

def _collect_comments(root: Node) -> List[Tuple[int, int, int]]:
    out: List[Tuple[int, int, int]] = []
    stack = [root]
    while stack:
        n = stack.pop()
        if n.type == "comment":
            out.append((n.start_byte, n.end_byte, n.start_point[0] + 1))
            continue
        stack.extend(reversed(n.children))
    out.sort()
    return out

def receiver_type_name(node: Node) -> str:
    # (t T), (t *T), (t *T[K]), (T) all resolve to "T"; no receiver resolves to "".
    recv = node.child_by_field_name("receiver")
    if recv is None:
        return ""
    for param in recv.named_children:
        if param.type == "parameter_declaration":
            return _base_type_name(param.child_by_field_name("type"))
    return ""

def _base_type_name(node: Optional[Node]) -> str:
    while node is not None:
        if node.type == "type_identifier":
            return _node_text(node)
        if node.type == "generic_type":
            node = node.child_by_field_name("type")
        elif node.type in ("pointer_type", "parenthesized_type"):
            inner = [c for c in node.named_children if c.type != "comment"]
            node = inner[0] if inner else None
        else:
            return ""
    return ""

def parse_source(path: Path, source: bytes) -> SourceUnit:
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(path, f"illegal UTF-8 encoding at byte {e.start}") from e

    tree = _go_parser().parse(source)
    root = tree.root_node
    if root.has_error:
        err = _first_error(root) or root
        row, col = err.start_point
        what = "missing " + err.type if err.is_missing else "syntax error"
        raise ParseError(path, f"{row + 1}:{col + 1}: {what}")

    comments = group_comments(source, _collect_comments(root))
    package = ""
    decls: List[Declaration] = []
    for node in root.named_children:
        if node.type == "comment":
            continue
        if node.type == "package_clause":
            for c in node.named_children:
                if c.type == "package_identifier":
                    package = _node_text(c)
            continue
        kind = _KIND_BY_NODE.get(node.type, DeclKind.OTHER)
        decl = Declaration(
            kind=kind,
            span=Span(node.start_byte, node.end_byte, node.start_point[0] + 1),
            doc=find_doc_comment(source, comments, node.start_byte),
        )
        if kind == DeclKind.FUNCTION:
            name = node.child_by_field_name("name")
            decl.name = _node_text(name) if name is not None else ""
            decl.receiver = receiver_type_name(node)
        decls.append(decl)

    if not package:
        raise ParseError(path, "missing package clause")
    return SourceUnit(path=path, package=package, source=source, declarations=decls, comments=comments)

def load_package_dir(package_dir: Path) -> Dict[str, List[SourceUnit]]:
    # All files are parsed before anything is returned; one bad file aborts the pass.
    pkgs: Dict[str, List[SourceUnit]] = {}
    for p in scan_go_files(package_dir):
        try:
            source = p.read_bytes()
        except OSError as e:
            raise ParseError(p, str(e)) from e
        unit = parse_source(p, source)
        pkgs.setdefault(unit.package, []).append(unit)
    return pkgs
