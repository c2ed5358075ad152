"""vuln_scanner package: app/core/infra/shared.

Scan a project's manifest for dependencies with known vulnerabilities.
"""

import logging

from .core.domain.enums import Ecosystem
from .core.usecases.scan_project import ScanProjectUseCase

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "Ecosystem",
    "ScanProjectUseCase",
]
