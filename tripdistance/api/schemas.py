"""Pydantic schemas for the callable wire protocol."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class CallableRequest(BaseModel):
    data: Optional[dict[str, Any]] = Field(
        None,
        description='Invocation payload, e.g. {"origin": "...", "destination": "..."}.',
        examples=[{"origin": "Berlin Hbf", "destination": "52.5200,13.4050"}],
    )


# ── Responses ─────────────────────────────────────────────────────────


class DistancePayload(BaseModel):
    """Success and soft-failure shapes share these keys; ``status`` tells them apart."""

    status: str
    distanceMeters: Optional[Union[int, float]] = None
    distanceText: Optional[str] = None
    durationText: Optional[str] = None


class CallableResponse(BaseModel):
    result: DistancePayload


class CallableErrorBody(BaseModel):
    status: str
    message: str
    details: Optional[Any] = None


class CallableErrorResponse(BaseModel):
    error: CallableErrorBody


class HealthResponse(BaseModel):
    status: str = "ok"
    provider_configured: bool = True
