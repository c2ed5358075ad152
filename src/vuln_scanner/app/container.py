from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..core.domain.enums import Ecosystem
from ..core.usecases.scan_project import ScanProjectUseCase
from ..infra.http_client import HttpClient
from ..infra.manifests.gomod import GoModParser
from ..infra.manifests.pom import PomParser
from ..infra.ossindex_adapter import OssIndexAdapter
from .report import Palette, ReportRenderer

logger = logging.getLogger(__name__)


def http_client_resource(timeout_seconds):
	"""Create the HTTP client as a resource so the connection pool is closed on shutdown."""
	logger.debug(f"Initializing HTTP client (timeout={timeout_seconds}s)")
	client = HttpClient(
		base_headers={"Accept": "application/json"},
		timeout_seconds=timeout_seconds,
	)
	try:
		yield client
	finally:
		logger.debug("Closing HTTP client")
		client.close()


def palette_factory(color):
	return Palette.ansi() if color else Palette.plain()


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	http_client = providers.Resource(
		http_client_resource,
		timeout_seconds=config.timeout_seconds,
	)

	query = providers.Factory(OssIndexAdapter, http_client=http_client, url=config.ossindex_url)

	parsers = providers.Dict({
		Ecosystem.GO: providers.Factory(GoModParser),
		Ecosystem.JAVA: providers.Factory(PomParser),
	})

	scan_uc = providers.Factory(ScanProjectUseCase, parsers=parsers, query=query)

	palette = providers.Factory(palette_factory, color=config.color)

	renderer = providers.Factory(
		ReportRenderer,
		palette=palette,
		width=config.report_width,
		description_limit=config.description_limit,
	)
