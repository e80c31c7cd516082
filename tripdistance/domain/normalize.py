"""
Upstream body -> ``DistanceResult``.

Only the first origin/destination pair (``rows[0].elements[0]``) is ever
consulted.  Extra rows or elements are ignored.

Rules
-----
1. Top-level status not OK, element missing, or element status not OK
   -> ``RouteUnavailable`` with the element status.  With no element the
   top-level status is reported (``OVER_QUERY_LIMIT`` responses carry an
   empty grid), and ``"ERROR"`` when neither says anything.
2. Both OK -> ``RouteFound``; traffic-adjusted duration wins over the
   baseline duration whenever the provider supplied it.
3. Both OK but distance / duration fields missing or mistyped
   -> ``InternalError``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .entities import DistanceResult, RouteFound, RouteUnavailable
from .enums import MISSING_ELEMENT_STATUS, ProviderStatus
from .errors import InternalError

logger = logging.getLogger(__name__)


def first_element(body: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """Return ``rows[0].elements[0]`` or ``None`` when the grid is empty."""
    rows = body.get("rows")
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], Mapping):
        return None
    elements = rows[0].get("elements")
    if not isinstance(elements, list) or not elements:
        return None

    if len(rows) > 1 or len(elements) > 1:
        logger.warning(
            "Provider returned a %dx%d grid; only the first pair is used",
            len(rows),
            len(elements),
        )

    element = elements[0]
    return element if isinstance(element, Mapping) else None


def _failure_status(top_status: Any, element: Optional[Mapping[str, Any]]) -> str:
    # Most specific non-OK code wins: element, then top level, then sentinel
    candidates = (element.get("status") if element is not None else None, top_status)
    for status in candidates:
        if isinstance(status, str) and status and status != ProviderStatus.OK:
            return status
    return MISSING_ELEMENT_STATUS


def normalize(body: Mapping[str, Any]) -> DistanceResult:
    element = first_element(body)
    top_status = body.get("status")

    if (
        top_status != ProviderStatus.OK
        or element is None
        or element.get("status") != ProviderStatus.OK
    ):
        return RouteUnavailable(status=_failure_status(top_status, element))

    distance = element.get("distance")
    if not isinstance(distance, Mapping):
        raise InternalError("Server error", details="element has no distance")
    value = distance.get("value")
    distance_text = distance.get("text")
    duration_text = _duration_text(element)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InternalError("Server error", details=f"bad distance value: {value!r}")
    if not isinstance(distance_text, str) or not isinstance(duration_text, str):
        raise InternalError(
            "Server error",
            details=f"bad display text: {distance_text!r} / {duration_text!r}",
        )
    return RouteFound(
        distance_meters=value,
        distance_text=distance_text,
        duration_text=duration_text,
    )


def _duration_text(element: Mapping[str, Any]) -> Any:
    # Traffic-adjusted text wins whenever the provider supplied one
    for key in ("duration_in_traffic", "duration"):
        duration = element.get(key)
        if isinstance(duration, Mapping) and duration.get("text") is not None:
            return duration["text"]
    return None
