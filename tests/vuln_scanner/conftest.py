"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from vuln_scanner.config.urls import OSS_INDEX_COMPONENT_REPORT_URL


GO_MOD = """module example.com/demo

go 1.21

require github.com/pkg/errors v0.9.1

require (
	github.com/gin-gonic/gin v1.9.0
	golang.org/x/text v0.3.7 // indirect
	this line is not a requirement
)
"""

POM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.example</groupId>
  <artifactId>demo</artifactId>
  <version>1.0.0</version>
  <dependencies>
    <dependency>
      <groupId>org.apache.logging.log4j</groupId>
      <artifactId>log4j-core</artifactId>
      <version>2.14.1</version>
    </dependency>
    <dependency>
      <groupId>junit</groupId>
      <artifactId>junit</artifactId>
    </dependency>
  </dependencies>
</project>
"""


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer VULN_SCANNER_* settings out of the tests."""
    for name in ("OSSINDEX_URL", "TIMEOUT_SECONDS", "REPORT_WIDTH", "DESCRIPTION_LIMIT", "COLOR"):
        monkeypatch.delenv(f"VULN_SCANNER_{name}", raising=False)


@pytest.fixture
def go_project(tmp_path: Path):
    """Factory writing a go.mod (default content unless given) into a project dir."""

    def _make(content: str = GO_MOD) -> Path:
        (tmp_path / "go.mod").write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def java_project(tmp_path: Path):
    """Factory writing a pom.xml (default content unless given) into a project dir."""

    def _make(content: str = POM_XML) -> Path:
        (tmp_path / "pom.xml").write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a handler function that tests can use to register mock responses.
    Each call is logged as (method, url, decoded JSON body or None).
    """
    responses = {}
    calls_log: list[tuple[str, str, object]] = []
    original_client = httpx.Client

    def add_response(
        url: str = OSS_INDEX_COMPONENT_REPORT_URL,
        method: str = "POST",
        status_code: int = 200,
        json_payload: object = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ):
        """Register a mock response (or a transport error) for a given URL and method."""
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body, error)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        method = request.method
        url = str(request.url)
        payload = json.loads(request.content) if request.content else None
        calls_log.append((method, url, payload))
        key = (method, url)
        if key in responses:
            status, body, error = responses[key]
            if error is not None:
                raise error
            headers = {"Content-Length": str(len(body)), "Content-Type": "application/json"}
            return httpx.Response(status, content=body, headers=headers)

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.calls = calls_log  # type: ignore[attr-defined]
    return add_response
