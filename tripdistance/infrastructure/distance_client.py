"""
Async HTTP client for the Distance Matrix provider.

Wraps a shared ``httpx.AsyncClient`` (one connection pool per process).
Every transport problem, and any body that does not decode to a JSON
object, surfaces as ``InternalError`` carrying the cause's string.  The
HTTP status code is not inspected; the provider reports failures in the
body.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tripdistance.domain.entities import UpstreamQuery
from tripdistance.domain.errors import InternalError

logger = logging.getLogger(__name__)


def build_http_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Return the process-wide HTTP client with a fixed timeout."""
    return httpx.AsyncClient(timeout=timeout_seconds)


class DistanceMatrixClient:
    def __init__(self, http: httpx.AsyncClient, url: str):
        self.http = http
        self.url = url

    async def fetch(self, query: UpstreamQuery) -> dict[str, Any]:
        """Issue one GET and return the decoded body."""
        try:
            response = await self.http.get(self.url, params=query.to_params())
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError covers json.JSONDecodeError and bad UTF-8
            logger.error(
                "Distance Matrix call failed for %r -> %r: %s",
                query.origins,
                query.destinations,
                exc,
            )
            raise InternalError("Server error", details=str(exc) or repr(exc)) from exc

        if not isinstance(body, dict):
            logger.error(
                "Distance Matrix returned a non-object body (%s)", type(body).__name__
            )
            raise InternalError(
                "Server error",
                details=f"unexpected response body: {type(body).__name__}",
            )
        return body
