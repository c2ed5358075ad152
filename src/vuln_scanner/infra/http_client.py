from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx


class HttpClient:
    def __init__(
        self,
        base_headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers=dict(base_headers or {}),
            follow_redirects=True,
            max_redirects=10
        )

    def post_json(self, url: str, payload: dict) -> Any:
        """POST `payload` as JSON and return the decoded response body.

        Raises httpx.HTTPError on transport or status failure and ValueError
        when the body is not JSON.
        """
        resp = self._client.post(url, json=payload)
        resp.raise_for_status()
        return resp.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
