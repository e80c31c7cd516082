"""FastAPI dependency injection helpers."""

from fastapi import Request

from tripdistance.domain.proxy import DistanceProxy


def get_distance_proxy(request: Request) -> DistanceProxy:
    """Return the process-wide proxy built by ``create_app``."""
    return request.app.state.distance_proxy
