from __future__ import annotations

from typing import Optional

from ..config import GENERATED_MARKER, TEST_PACKAGE_SUFFIX
from ..types import SourceUnit

def exclusion_reason(unit: SourceUnit) -> Optional[str]:
    # Used by both the extraction and the rewrite pass; they must agree.
    if len(unit.package) > len(TEST_PACKAGE_SUFFIX) and unit.package.endswith(TEST_PACKAGE_SUFFIX):
        return "test package"
    for c in unit.comments:
        if GENERATED_MARKER in c.text:
            return "generated"
    if len(unit.functions()) <= 1:
        return "single function"
    return None

def is_target(unit: SourceUnit) -> bool:
    return exclusion_reason(unit) is None
