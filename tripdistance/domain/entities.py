"""
Request-scoped value objects.

Patterns used
-------------
- ``DistanceRequest.from_payload`` is the only way caller input enters the
  domain; it rejects missing / empty locations.
- ``DistanceResult`` is a tagged union of ``RouteFound`` and
  ``RouteUnavailable``.  Callers branch on ``ok`` (or ``isinstance``),
  never on an exception, for provider-reported outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

from .enums import TRAFFIC_MODEL, TRAVEL_MODE, UNITS, ProviderStatus
from .errors import InvalidArgument


# ── Request ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DistanceRequest:
    origin: str
    destination: str

    @classmethod
    def from_payload(cls, data: Optional[Mapping[str, Any]]) -> "DistanceRequest":
        """Build from the caller's ``data`` object or raise ``InvalidArgument``."""
        data = data or {}
        origin = data.get("origin")
        destination = data.get("destination")
        if not _is_location(origin) or not _is_location(destination):
            raise InvalidArgument("origin and destination required")
        return cls(origin=origin, destination=destination)


def _is_location(value: Any) -> bool:
    # Opaque descriptor: passed through verbatim, only emptiness is checked
    return isinstance(value, str) and value != ""


@dataclass(frozen=True)
class UpstreamQuery:
    origins: str
    destinations: str
    departure_time: int
    key: str
    units: str = UNITS
    mode: str = TRAVEL_MODE
    traffic_model: str = TRAFFIC_MODEL

    @classmethod
    def for_request(
        cls, request: DistanceRequest, *, key: str, departure_time: int
    ) -> "UpstreamQuery":
        return cls(
            origins=request.origin,
            destinations=request.destination,
            departure_time=departure_time,
            key=key,
        )

    def to_params(self) -> dict[str, str]:
        return {
            "origins": self.origins,
            "destinations": self.destinations,
            "units": self.units,
            "mode": self.mode,
            "departure_time": str(self.departure_time),
            "traffic_model": self.traffic_model,
            "key": self.key,
        }


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RouteFound:
    distance_meters: Union[int, float]
    distance_text: str
    duration_text: str
    status: Literal["OK"] = ProviderStatus.OK.value

    ok = True

    def to_payload(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "distanceMeters": self.distance_meters,
            "distanceText": self.distance_text,
            "durationText": self.duration_text,
        }


@dataclass(frozen=True)
class RouteUnavailable:
    """Soft failure: the provider answered but reported a non-OK status."""

    status: str

    ok = False

    def to_payload(self) -> dict[str, Any]:
        return {"status": self.status, "distanceMeters": None, "durationText": None}


DistanceResult = Union[RouteFound, RouteUnavailable]
