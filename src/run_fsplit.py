from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from fsplit.config import CONFIG
from fsplit.errors import FsplitError
from fsplit.split.pipeline import run_fsplit

console = Console()

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="fsplit",
        description="Move every function and method of a Go package into its own file.",
    )
    ap.add_argument("package_path", help="Directory of the Go package to split")
    args = ap.parse_args(argv)

    try:
        report = run_fsplit(args.package_path, progress=CONFIG.show_progress)
    except FsplitError as e:
        console.print(f"[red]Error running fsplit: {escape(str(e))}[/red]")
        return 1

    for path, reason in report.skipped.items():
        console.print(f"[yellow]Skipped {escape(path)} ({reason})[/yellow]")
    console.print(
        f"[green]Done. Wrote {len(report.written)} function files, "
        f"rewrote {len(report.rewritten)} files in {escape(report.package_path)}[/green]"
    )
    return 0

if __name__ == "__main__":
    sys.exit(main())
