from __future__ import annotations

from pathlib import Path
from typing import List

from tqdm import tqdm

from ..errors import FormatError, WriteError
from ..formatter import Formatter
from ..types import ExtractedFunction

def compose_file(func_file: ExtractedFunction) -> str:
    parts = [func_file.package.rstrip()]
    if func_file.imports:
        parts.append(func_file.imports.rstrip("\n"))
    parts.append(func_file.func.rstrip("\n"))
    return "\n\n".join(parts) + "\n"

def write_formatted(path: str, content: str, formatter: Formatter) -> None:
    try:
        formatted = formatter.process(path, content)
    except FormatError as e:
        raise WriteError(path, f"formatting failed: {e.message}") from e
    try:
        Path(path).write_text(formatted, encoding="utf-8")
    except OSError as e:
        raise WriteError(path, str(e)) from e

def create_single_function_files(
    func_files: List[ExtractedFunction],
    formatter: Formatter,
    progress: bool = False,
) -> List[str]:
    # Aborts on the first failure; files already written stay on disk.
    written: List[str] = []
    for func_file in tqdm(func_files, desc="fsplit", unit="file", disable=not progress):
        write_formatted(func_file.file_name, compose_file(func_file), formatter)
        written.append(func_file.file_name)
    return written
