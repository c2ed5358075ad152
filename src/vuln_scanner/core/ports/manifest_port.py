from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from ..domain.models import ManifestEntry


class ManifestParserPort(Protocol):
    def parse(self, path: Path) -> Sequence[ManifestEntry]:
        """Return declared dependencies in manifest order, duplicates kept.

        Raises ManifestReadError when the file cannot be read and
        ManifestFormatError when its structure is invalid.
        """
        ...
