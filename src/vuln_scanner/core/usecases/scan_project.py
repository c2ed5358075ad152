from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Sequence

from ..domain.enums import Ecosystem
from ..domain.models import DependencyReport, format_coordinates
from ..errors import ManifestNotFoundError
from ..ports.manifest_port import ManifestParserPort
from ..ports.query_port import VulnerabilityQueryPort

logger = logging.getLogger(__name__)


class ScanProjectUseCase:
    """Parse an ecosystem manifest and look up its dependencies in one batch.

    The steps are exposed separately so a caller can report progress between
    them: locate_manifest -> collect_coordinates -> check.
    """

    def __init__(self, parsers: Mapping[Ecosystem, ManifestParserPort], query: VulnerabilityQueryPort) -> None:
        self._parsers = dict(parsers)
        self._query = query

    def locate_manifest(self, ecosystem: Ecosystem, project_dir: Path | str) -> Path:
        path = Path(project_dir) / ecosystem.manifest_name
        if not path.is_file():
            raise ManifestNotFoundError(path, f"{ecosystem.manifest_name} not found in the specified path.")
        return path

    def collect_coordinates(self, ecosystem: Ecosystem, project_dir: Path | str) -> list[str]:
        path = self.locate_manifest(ecosystem, project_dir)
        parser = self._parsers[ecosystem]
        entries = parser.parse(path)
        coordinates = format_coordinates(entries)
        logger.info(f"Collected {len(coordinates)} coordinates from {path}")
        return coordinates

    def check(self, coordinates: Sequence[str]) -> list[DependencyReport]:
        if not coordinates:
            logger.debug("Nothing to check")
            return []
        reports = list(self._query.component_report(coordinates))
        logger.info(f"{sum(1 for r in reports if r.is_vulnerable)} of {len(reports)} components have vulnerabilities")
        return reports
