from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .enums import Ecosystem


@dataclass(frozen=True)
class GoModule:
    path: str
    version: str

    def to_coordinate(self) -> str:
        return f"pkg:{Ecosystem.GO.purl_type}/{self.path}@v{self.version}"


@dataclass(frozen=True)
class MavenArtifact:
    group_id: str
    artifact_id: str
    version: str

    def to_coordinate(self) -> str:
        return f"pkg:{Ecosystem.JAVA.purl_type}/{self.group_id}/{self.artifact_id}@{self.version}"


ManifestEntry = Union[GoModule, MavenArtifact]


def format_coordinates(entries: Iterable[ManifestEntry]) -> list[str]:
    """Turn manifest entries into package URLs, keeping order and duplicates."""
    return [entry.to_coordinate() for entry in entries]


@dataclass(frozen=True)
class VulnerabilityRecord:
    id: str
    title: str = ""
    description: str = ""
    score: float = 0.0
    cve: Optional[str] = None
    reference: str = ""

    @property
    def display_id(self) -> str:
        return self.cve or self.id


@dataclass(frozen=True)
class DependencyReport:
    coordinate: str
    vulnerabilities: tuple[VulnerabilityRecord, ...] = field(default_factory=tuple)

    @property
    def is_vulnerable(self) -> bool:
        return len(self.vulnerabilities) > 0
