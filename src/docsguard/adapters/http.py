"""
HTTP adapter for docsguard.

Handles fetching the remote tool manifest.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from docsguard.config import DEFAULT_TIMEOUT, USER_AGENT
from docsguard.domain.exceptions import ManifestFetchError, ManifestParseError


class HttpAdapter:
    """
    Adapter for HTTP operations.

    Uses httpx's async client; the transport can be swapped for an
    ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the HTTP adapter.

        Args:
            timeout: Request timeout in seconds.
            verify_ssl: Whether to verify SSL certificates.
            transport: Optional custom transport.
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.transport = transport

    def build_headers(self, token: str | None = None) -> dict[str, str]:
        """Request headers for a manifest fetch."""
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def fetch_json(self, url: str, token: str | None = None) -> Any:
        """
        Fetch and parse JSON from a URL.

        Args:
            url: URL to fetch.
            token: Optional bearer token.

        Returns:
            Parsed JSON data.

        Raises:
            ManifestFetchError: If the URL is not https, the request fails,
                or it returns status >= 400.
            ManifestParseError: If the body isn't valid JSON.
        """
        try:
            scheme = httpx.URL(url).scheme
        except httpx.InvalidURL as e:
            raise ManifestFetchError(f"Invalid manifest URL {url}: {e}", url=url)

        if scheme != "https":
            raise ManifestFetchError(f"Refusing non-HTTPS manifest URL: {url}", url=url)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            verify=self.verify_ssl,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(url, headers=self.build_headers(token))
            except httpx.HTTPError as e:
                raise ManifestFetchError(f"Fetch failed for {url}: {e}", url=url)

        if response.status_code >= 400:
            raise ManifestFetchError(
                f"Fetch failed ({response.status_code}) for {url}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return json.loads(response.text)
        except json.JSONDecodeError as e:
            raise ManifestParseError(f"Invalid JSON from {url}: {e.msg}", source=url, line=e.lineno)
