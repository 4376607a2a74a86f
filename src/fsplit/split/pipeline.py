from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..formatter import Formatter, GoImportsFormatter
from ..types import SplitReport
from .extractor import extract_functions
from .materializer import create_single_function_files
from .rewriter import remove_functions

def run_fsplit(
    package_path: Union[str, Path],
    formatter: Optional[Formatter] = None,
    progress: bool = False,
) -> SplitReport:
    """Split every function of the package at ``package_path`` into its own file.

    Pass 1 parses the directory and writes one ``<stem>.<recv>.<func>.fsplit.go``
    file per function. Pass 2 parses the directory again and removes the
    functions from the original files. Nothing is rolled back: if pass 2 fails,
    the new files written by pass 1 stay on disk next to unchanged originals.

    Raises ``ParseError`` for unreadable or malformed sources and
    ``WriteError`` when formatting or writing a file fails. Before anything is
    written, ``NameCollisionError`` is raised if two functions would land in
    the same output file. All three derive from ``FsplitError``.
    """
    package_path = Path(package_path)
    formatter = formatter or GoImportsFormatter()
    report = SplitReport(package_path=str(package_path))

    # 1) Extract functions (no writes until every file parsed)
    func_files = extract_functions(package_path, skipped=report.skipped)

    # 2) Write single function files
    report.written = create_single_function_files(func_files, formatter, progress=progress)

    # 3) Remove the functions from the originals
    report.rewritten = remove_functions(package_path, formatter)
    return report
