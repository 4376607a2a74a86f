from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol

from .config import CONFIG
from .errors import FormatError

class Formatter(Protocol):
    def process(self, filename: str, source: str) -> str:  # formatted, unused imports removed
        ...

@dataclass
class GoImportsFormatter:
    binary: str = field(default_factory=lambda: CONFIG.goimports_bin)

    def command(self, filename: str) -> List[str]:
        # goimports reads stdin; -srcdir picks the directory used to resolve imports.
        return [self.binary, "-srcdir", str(Path(filename).parent)]

    def process(self, filename: str, source: str) -> str:
        try:
            proc = subprocess.run(
                self.command(filename),
                input=source,
                capture_output=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as e:
            raise FormatError(
                filename,
                f"{self.binary} not found (go install golang.org/x/tools/cmd/goimports@latest)",
            ) from e
        if proc.returncode != 0:
            msg = proc.stderr.strip() or f"{self.binary} exited with status {proc.returncode}"
            raise FormatError(filename, msg)
        return proc.stdout
