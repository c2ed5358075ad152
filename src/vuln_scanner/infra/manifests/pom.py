from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional

from defusedxml import ElementTree as SafeET
from defusedxml.common import DefusedXmlException

from ...core.domain.models import MavenArtifact
from ...core.errors import ManifestFormatError, ManifestReadError

logger = logging.getLogger(__name__)


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            yield child


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    for child in _children(element, name):
        text = (child.text or "").strip()
        return text or None
    return None


def _to_artifact(dependency: ET.Element) -> Optional[MavenArtifact]:
    group_id = _child_text(dependency, "groupId")
    artifact_id = _child_text(dependency, "artifactId")
    version = _child_text(dependency, "version")
    if group_id is None or artifact_id is None or version is None:
        return None
    return MavenArtifact(group_id=group_id, artifact_id=artifact_id, version=version)


class PomParser:
    """Extract `project/dependencies/dependency` entries from a pom.xml file.

    Tags are compared by local name, so the Maven POM namespace is optional.
    Dependencies missing groupId, artifactId or version are skipped.
    """

    def parse(self, path: Path) -> list[MavenArtifact]:
        logger.debug(f"Reading pom.xml at {path}")
        try:
            with open(path, "rb") as fh:
                tree = SafeET.parse(fh)
        except OSError as e:
            raise ManifestReadError(path, f"cannot read manifest ({e})") from e
        except (ET.ParseError, DefusedXmlException) as e:
            raise ManifestFormatError(path, f"malformed XML ({e})") from e

        root = tree.getroot()
        if _local_name(root.tag) != "project":
            raise ManifestFormatError(path, f"expected <project> root element, found <{_local_name(root.tag)}>")

        artifacts: list[MavenArtifact] = []
        skipped = 0
        for dependencies in _children(root, "dependencies"):
            for dependency in _children(dependencies, "dependency"):
                artifact = _to_artifact(dependency)
                if artifact is None:
                    skipped += 1
                    continue
                artifacts.append(artifact)
        logger.info(f"Parsed {len(artifacts)} dependencies from {path} (skipped {skipped} incomplete)")
        return artifacts
