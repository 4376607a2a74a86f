from __future__ import annotations

from pathlib import Path

from ..config import NO_RECEIVER, SPLIT_MARKER

def original_stem(stem: str) -> str:
    # "a.T.Foo.fsplit" -> "a": strip exactly one previous split layer.
    if not stem.endswith("." + SPLIT_MARKER):
        return stem
    parts = stem.split(".")
    if len(parts) < 4:
        return stem
    return ".".join(parts[:-3])

def new_file_name(original: str, recv: str, func_name: str) -> str:
    p = Path(original)
    ext = p.suffix
    stem = original_stem(p.name[: len(p.name) - len(ext)])
    recv = recv or NO_RECEIVER
    return str(p.with_name(f"{stem}.{recv}.{func_name}.{SPLIT_MARKER}{ext}"))
