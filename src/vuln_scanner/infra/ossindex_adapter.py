from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx
from cvss import CVSS2, CVSS3
from cvss.exceptions import CVSSError
from pydantic import TypeAdapter, ValidationError

from ..core.domain.models import DependencyReport, VulnerabilityRecord
from ..core.errors import QueryDecodeError, QueryTransportError
from ..core.ports.query_port import VulnerabilityQueryPort
from .http_client import HttpClient
from .schemas import ComponentReport, OssIndexVulnerability

logger = logging.getLogger(__name__)

_REPORTS = TypeAdapter(list[ComponentReport])


def score_from_vector(vector: str) -> Optional[float]:
    """Compute a CVSS base score from a v3 (``CVSS:3.x/...``) or v2 vector."""
    try:
        if vector.upper().startswith("CVSS:3"):
            return float(CVSS3(vector).scores()[0])
        return float(CVSS2(vector).scores()[0])
    except CVSSError:
        logger.debug(f"Unparsable CVSS vector: {vector}")
        return None


def _to_record(v: OssIndexVulnerability) -> VulnerabilityRecord:
    score = v.cvss_score
    if score is None and v.cvss_vector:
        score = score_from_vector(v.cvss_vector)
    return VulnerabilityRecord(
        id=v.id,
        title=v.title,
        description=v.description,
        score=score if score is not None else 0.0,
        cve=v.cve or None,
        reference=v.reference,
    )


def _to_domain(report: ComponentReport) -> DependencyReport:
    return DependencyReport(
        coordinate=report.coordinates,
        vulnerabilities=tuple(_to_record(v) for v in report.vulnerabilities),
    )


class OssIndexAdapter(VulnerabilityQueryPort):
    def __init__(self, http_client: HttpClient, url: str) -> None:
        self._http = http_client
        self._url = url

    def component_report(self, coordinates: Sequence[str]) -> list[DependencyReport]:
        if not coordinates:
            logger.debug("No coordinates to query; skipping request")
            return []

        logger.info(f"Querying {self._url} for {len(coordinates)} coordinates")
        try:
            raw = self._http.post_json(self._url, {"coordinates": list(coordinates)})
        except httpx.HTTPError as e:
            raise QueryTransportError(f"request to {self._url} failed: {e}") from e
        except ValueError as e:
            raise QueryDecodeError(f"response is not valid JSON: {e}") from e

        try:
            reports = _REPORTS.validate_python(raw)
        except ValidationError as e:
            raise QueryDecodeError(f"unexpected response schema: {e.error_count()} validation errors") from e

        logger.info(f"Received {len(reports)} component reports")
        return [_to_domain(r) for r in reports]
