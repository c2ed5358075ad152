from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Tuple

from ...core.domain.models import GoModule
from ...core.errors import ManifestReadError

logger = logging.getLogger(__name__)


REQUIRE_BLOCK_OPEN_RE = re.compile(r"^require\s*\(")
REQUIRE_DIRECTIVE_RE = re.compile(r"^require\s+")
REQUIREMENT_RE = re.compile(r"^\s*(?P<path>[^\s]+)\s+v(?P<version>[0-9A-Za-z.\-+]+)")


class ScanState(Enum):
    OUTSIDE = "OUTSIDE"
    IN_REQUIRE_BLOCK = "IN_REQUIRE_BLOCK"


def _match_requirement(text: str) -> Optional[GoModule]:
    m = REQUIREMENT_RE.match(text)
    if not m:
        return None
    return GoModule(path=m.group("path"), version=m.group("version"))


def scan_line(state: ScanState, line: str) -> Tuple[ScanState, Optional[GoModule]]:
    """Advance the go.mod scanner by one line.

    Returns the next state and the requirement found on this line, if any.
    Block delimiters never yield an entry; malformed requirement lines yield
    nothing and leave the state unchanged.
    """
    stripped = line.strip()
    if state is ScanState.OUTSIDE:
        if REQUIRE_BLOCK_OPEN_RE.match(stripped):
            return ScanState.IN_REQUIRE_BLOCK, None
        directive = REQUIRE_DIRECTIVE_RE.match(stripped)
        if directive:
            return state, _match_requirement(stripped[directive.end():])
        return state, None

    if stripped.startswith(")"):
        return ScanState.OUTSIDE, None
    return state, _match_requirement(stripped)


def scan_lines(lines: Iterable[str]) -> list[GoModule]:
    state = ScanState.OUTSIDE
    modules: list[GoModule] = []
    for line in lines:
        state, module = scan_line(state, line)
        if module is not None:
            modules.append(module)
    return modules


class GoModParser:
    """Extract `require` entries from a go.mod file."""

    def parse(self, path: Path) -> list[GoModule]:
        logger.debug(f"Reading go.mod at {path}")
        try:
            with open(path, encoding="utf-8") as fh:
                modules = scan_lines(fh)
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestReadError(path, f"cannot read manifest ({e})") from e
        logger.info(f"Parsed {len(modules)} requirements from {path}")
        return modules
