"""
Admin / observability endpoints
===============================

GET /health -- liveness plus whether the provider key is configured
"""

from fastapi import APIRouter, Depends

from tripdistance.api.dependencies import get_distance_proxy
from tripdistance.api.schemas import HealthResponse
from tripdistance.domain.proxy import DistanceProxy

router = APIRouter(tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(proxy: DistanceProxy = Depends(get_distance_proxy)):
    return HealthResponse(provider_configured=proxy.configured)
