"""
DistanceProxy
=============

Stateless translation between one caller request and one upstream call::

    validate -> build UpstreamQuery -> fetch -> normalize

Fault tiers
-----------
* ``InvalidArgument``    -- origin / destination missing or empty.
* ``FailedPrecondition`` -- no provider key configured.
* ``InternalError``      -- transport failure or undecodable body.

Provider-reported outcomes (``ZERO_RESULTS``, ``OVER_QUERY_LIMIT`` ...)
come back as ``RouteUnavailable``; they are never raised.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping, Optional, Protocol

from .entities import DistanceRequest, DistanceResult, UpstreamQuery
from .errors import FailedPrecondition
from .normalize import normalize

logger = logging.getLogger(__name__)


class UpstreamFetcher(Protocol):
    async def fetch(self, query: UpstreamQuery) -> dict[str, Any]: ...


class DistanceProxy:
    def __init__(
        self,
        api_key: Optional[str],
        upstream: UpstreamFetcher,
        clock: Callable[[], float] = time.time,
    ):
        self._api_key = api_key or None
        self._upstream = upstream
        self._clock = clock

    @property
    def configured(self) -> bool:
        return self._api_key is not None

    async def invoke(self, data: Optional[Mapping[str, Any]]) -> DistanceResult:
        """Validate *data*, query the provider once and normalize the answer."""
        request = DistanceRequest.from_payload(data)
        if self._api_key is None:
            raise FailedPrecondition("API key missing on server")

        query = UpstreamQuery.for_request(
            request, key=self._api_key, departure_time=int(self._clock())
        )
        body = await self._upstream.fetch(query)
        result = normalize(body)

        if not result.ok:
            logger.warning(
                "No route %r -> %r: %s",
                request.origin,
                request.destination,
                result.status,
            )
        return result
