"""
Distance endpoint
=================

POST /distanceMatrix -- callable: ``{"data": {origin, destination}}`` in,
                        ``{"result": ...}`` or ``{"error": ...}`` out

Provider soft failures (no route, quota exhausted ...) are HTTP 200 with a
non-OK ``result.status``.  Only caller, configuration and transport faults
produce an error envelope.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tripdistance.api.dependencies import get_distance_proxy
from tripdistance.api.schemas import (
    CallableErrorResponse,
    CallableRequest,
    CallableResponse,
)
from tripdistance.domain.proxy import DistanceProxy

router = APIRouter(tags=["distance"])


@router.post(
    "/distanceMatrix",
    response_model=CallableResponse,
    response_model_exclude_unset=True,
    summary="Driving distance and travel time between two locations",
    responses={
        400: {
            "model": CallableErrorResponse,
            "description": "INVALID_ARGUMENT or FAILED_PRECONDITION",
        },
        500: {"model": CallableErrorResponse, "description": "INTERNAL"},
    },
)
async def distance_matrix(
    body: CallableRequest,
    proxy: DistanceProxy = Depends(get_distance_proxy),
):
    result = await proxy.invoke(body.data)
    return {"result": result.to_payload()}
