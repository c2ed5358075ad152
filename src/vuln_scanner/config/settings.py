from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .urls import OSS_INDEX_COMPONENT_REPORT_URL


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the VULN_SCANNER_ prefix.
    For example:
        - VULN_SCANNER_OSSINDEX_URL=https://mirror.example/api/v3/component-report
        - VULN_SCANNER_TIMEOUT_SECONDS=30
        - VULN_SCANNER_REPORT_WIDTH=120
        - VULN_SCANNER_COLOR=false

    The CLI overrides `color` when --no-color is given:
        container.config.from_pydantic(AppConfig(color=False))
    """

    model_config = SettingsConfigDict(
        env_prefix="VULN_SCANNER_",
        case_sensitive=False,
        extra="forbid",
    )

    ossindex_url: str = Field(
        default=OSS_INDEX_COMPONENT_REPORT_URL,
        description="OSS Index component-report endpoint receiving the batch query",
    )

    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="HTTP timeout for the single component-report request",
    )

    report_width: int = Field(
        default=96,
        ge=40,
        description="Total width of each report box in terminal cells, borders included",
    )

    description_limit: int = Field(
        default=80,
        ge=1,
        description="Maximum number of description characters shown before '...'",
    )

    color: bool = Field(
        default=True,
        description="Emit ANSI colours and OSC-8 hyperlinks",
    )
