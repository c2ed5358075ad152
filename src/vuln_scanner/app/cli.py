from __future__ import annotations

"""vuln_scanner.app.cli
=================================
Command-line interface powered by Typer.

Usage examples
--------------
$ vulnscanner go /path/to/project          # check go.mod requirements
$ vulnscanner java /path/to/project        # check pom.xml dependencies
$ vulnscanner java . --no-color            # plain text, no escape sequences
"""

import logging
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

import typer
from typing_extensions import Annotated

from ..config.settings import AppConfig
from ..core.domain.enums import Ecosystem
from ..core.errors import ManifestError, ManifestNotFoundError, QueryError
from .container import Container

app = typer.Typer(
	add_completion=False,
	help="Check a project's declared dependencies against the OSS Index vulnerability database.",
)


class LogLevel(str, Enum):
	OFF = "OFF"
	CRITICAL = "CRITICAL"
	ERROR = "ERROR"
	WARNING = "WARNING"
	INFO = "INFO"
	DEBUG = "DEBUG"


def _configure_logging(log_level: Optional[LogLevel]) -> None:
	if log_level in (None, LogLevel.OFF):
		return

	level = logging.getLevelNamesMapping().get(log_level.value, logging.INFO)
	package_name = __package__.split(".", 1)[0] if __package__ else "vuln_scanner"
	logger = logging.getLogger(package_name)

	has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
	if not has_stream:
		handler = logging.StreamHandler()  # stderr
		handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
		logger.addHandler(handler)

	logger.propagate = False
	logger.setLevel(level)


@contextmanager
def provide_container(**overrides) -> Iterator[Container]:
	container = Container()
	container.config.from_pydantic(AppConfig(**overrides))
	try:
		yield container
	finally:
		container.shutdown_resources()


@app.command(help="Scan the manifest of ECOSYSTEM (go: go.mod, java: pom.xml) found in PROJECT_PATH.")
def scan(
	ecosystem: Annotated[Ecosystem, typer.Argument(case_sensitive=False, help="Project ecosystem: go or java")],
	project_path: Annotated[Path, typer.Argument(help="Path to the project root containing the manifest")],
	no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colours and hyperlinks")] = False,
	log_level: Annotated[
		Optional[LogLevel],
		typer.Option("--log-level", case_sensitive=False, help="Log to stderr at this level. Default: OFF"),
	] = None,
) -> None:
	_configure_logging(log_level)
	overrides = {"color": False} if no_color else {}

	with provide_container(**overrides) as container:
		uc = container.scan_uc()
		color = container.config.color()

		try:
			uc.locate_manifest(ecosystem, project_path)
		except ManifestNotFoundError:
			typer.echo(f"{ecosystem.manifest_name} not found in the specified path.", err=True)
			raise typer.Exit(code=1)

		typer.echo(f"Parsing {ecosystem.manifest_name}...")
		try:
			coordinates = uc.collect_coordinates(ecosystem, project_path)
		except ManifestError as e:
			typer.echo(f"Error parsing dependencies: {e}", err=True)
			raise typer.Exit(code=1)

		if not coordinates:
			typer.echo("No dependencies found.")
			return

		typer.echo(f"Found {len(coordinates)} dependencies. Checking vulnerabilities...")
		try:
			reports = uc.check(coordinates)
		except QueryError as e:
			typer.echo(f"Error querying vulnerabilities: {e}", err=True)
			raise typer.Exit(code=1)

		renderer = container.renderer()
		for line in renderer.render(reports):
			typer.echo(line, color=color)


if __name__ == "__main__":  # pragma: no cover
	app()
