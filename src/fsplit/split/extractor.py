from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from ..config import INIT_FUNC
from ..errors import NameCollisionError
from ..source_index.loader import load_package_dir
from ..types import DeclKind, ExtractedFunction, SourceUnit
from .eligibility import exclusion_reason
from .naming import new_file_name

def package_header(unit: SourceUnit) -> str:
    # Everything before the first declaration: file comments, build tags, package clause.
    if not unit.declarations:
        return unit.slice(0, len(unit.source))
    return unit.slice(0, unit.declarations[0].text_start)

def import_text(unit: SourceUnit) -> str:
    out = ""
    for d in unit.declarations:
        if d.kind == DeclKind.IMPORT:
            out += unit.slice(d.span.start, d.span.end) + "\n"
    return out

def extract_file(unit: SourceUnit) -> List[ExtractedFunction]:
    header = package_header(unit)
    imports = import_text(unit)

    # init can be declared several times in one file
    init_cnt = 0
    out: List[ExtractedFunction] = []
    for d in unit.declarations:
        if d.kind == DeclKind.IMPORT or d.kind == DeclKind.OTHER:
            continue
        func_name = d.name
        if func_name == INIT_FUNC and not d.receiver:
            init_cnt += 1
            func_name = f"{INIT_FUNC}-{init_cnt:03d}"
        out.append(ExtractedFunction(
            file_name=new_file_name(str(unit.path), d.receiver, func_name),
            package=header,
            imports=imports,
            func=unit.slice(d.text_start, d.span.end),
            source_path=str(unit.path),
            name=f"{d.receiver}.{func_name}" if d.receiver else func_name,
        ))
    return out

def check_distinct_names(funcs: List[ExtractedFunction]) -> None:
    seen: Dict[str, ExtractedFunction] = {}
    for f in funcs:
        prev = seen.get(f.file_name)
        if prev is not None:
            raise NameCollisionError(
                f.file_name,
                f"both {prev.source_path} ({prev.name}) and {f.source_path} ({f.name}) map to this file",
            )
        seen[f.file_name] = f

def extract_functions(package_path: Path, skipped: Optional[Dict[str, str]] = None) -> List[ExtractedFunction]:
    pkgs = load_package_dir(package_path)

    funcs: List[ExtractedFunction] = []
    for units in pkgs.values():
        for unit in units:
            reason = exclusion_reason(unit)
            if reason is not None:
                if skipped is not None:
                    skipped[str(unit.path)] = reason
                continue
            funcs.extend(extract_file(unit))

    check_distinct_names(funcs)
    return funcs
