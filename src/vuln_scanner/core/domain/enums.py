from __future__ import annotations

from enum import Enum


class Ecosystem(str, Enum):
    GO = "go"
    JAVA = "java"

    @property
    def manifest_name(self) -> str:
        return _MANIFEST_NAMES[self]

    @property
    def purl_type(self) -> str:
        return _PURL_TYPES[self]


_MANIFEST_NAMES = {Ecosystem.GO: "go.mod", Ecosystem.JAVA: "pom.xml"}
_PURL_TYPES = {Ecosystem.GO: "golang", Ecosystem.JAVA: "maven"}


class Severity(Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
