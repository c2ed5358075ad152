from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.models import DependencyReport


class VulnerabilityQueryPort(Protocol):
    def component_report(self, coordinates: Sequence[str]) -> Sequence[DependencyReport]:
        """Look up every coordinate in one batch request.

        Returns reports in whatever order the service answers. An empty
        input returns an empty result without any network call.
        """
        ...
