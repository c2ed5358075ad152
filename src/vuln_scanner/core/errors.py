from __future__ import annotations

from pathlib import Path


class ScannerError(Exception):
    """Base class for every failure that terminates a scan."""


class ManifestError(ScannerError):
    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class ManifestReadError(ManifestError):
    """The manifest could not be opened or decoded."""


class ManifestNotFoundError(ManifestReadError):
    pass


class ManifestFormatError(ManifestError):
    """The manifest was read but is structurally invalid."""


class QueryError(ScannerError):
    pass


class QueryTransportError(QueryError):
    """Connection, transport or HTTP status failure talking to the lookup service."""


class QueryDecodeError(QueryError):
    """The lookup service answered with something that is not a component report."""
