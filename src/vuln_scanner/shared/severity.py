from __future__ import annotations

from ..core.domain.enums import Severity


def map_score_to_severity(score: float) -> Severity:
	"""Map a CVSS-style score (0.0-10.0) to a tier; lower bounds are inclusive."""
	if score >= 9.0:
		return Severity.CRITICAL
	if score >= 7.0:
		return Severity.HIGH
	if score >= 4.0:
		return Severity.MEDIUM
	return Severity.LOW
