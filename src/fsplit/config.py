from __future__ import annotations

import os
from dataclasses import dataclass

def _env(key: str, default: str) -> str:
    v = os.getenv(key)
    return default if v is None or v.strip() == "" else v.strip()

def _env_bool(key: str, default: bool) -> bool:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip().lower() not in ("0", "false", "no", "off")

# Fixed literals; these are part of the output naming format.
SPLIT_MARKER = "fsplit"
SOURCE_EXT = ".go"
TEST_PACKAGE_SUFFIX = "_test"
GENERATED_MARKER = "Code generated"
INIT_FUNC = "init"
NO_RECEIVER = "_"

@dataclass(frozen=True)
class FsplitConfig:
    # External import-pruning formatter
    goimports_bin: str = _env("FSPLIT_GOIMPORTS", "goimports")

    # CLI progress bar
    show_progress: bool = _env_bool("FSPLIT_PROGRESS", True)

CONFIG = FsplitConfig()
