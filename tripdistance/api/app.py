"""
FastAPI application factory.

* Registers the ``distanceMatrix`` callable and the health route.
* Builds one ``DistanceProxy`` per process from ``Settings``; the shared
  HTTP client is closed via lifespan on shutdown.
* Maps ``ProxyError``, malformed request envelopes and any other
  unhandled error onto the callable error envelope
  ``{"error": {status, message, details}}``.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tripdistance.api.routes import admin, distance
from tripdistance.config import Settings, settings as default_settings
from tripdistance.domain.enums import HTTP_STATUS_FOR_CODE, CallableErrorCode
from tripdistance.domain.errors import ProxyError
from tripdistance.domain.proxy import DistanceProxy
from tripdistance.infrastructure.distance_client import (
    DistanceMatrixClient,
    build_http_client,
)

logging.basicConfig(level=default_settings.log_level.upper())
logger = logging.getLogger(__name__)


def _error_envelope(code: str, message: str, details=None) -> dict:
    error = {"status": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


async def _proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=_error_envelope(exc.code.value, exc.message, exc.details),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error in %s", request.url.path, exc_info=exc)
    code = CallableErrorCode.INTERNAL
    return JSONResponse(
        status_code=HTTP_STATUS_FOR_CODE[code],
        content=_error_envelope(code.value, "Server error", str(exc) or repr(exc)),
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    code = CallableErrorCode.INVALID_ARGUMENT
    return JSONResponse(
        status_code=HTTP_STATUS_FOR_CODE[code],
        content=_error_envelope(code.value, "Bad Request"),
    )


def create_app(
    app_settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    app_settings = app_settings or default_settings
    http = http_client or build_http_client(app_settings.upstream_timeout_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not app_settings.distance_api_key:
            logger.warning(
                "DISTANCE_API_KEY is not set; distanceMatrix will fail with "
                "FAILED_PRECONDITION"
            )
        yield
        await http.aclose()

    app = FastAPI(
        title="Trip Distance Proxy",
        description=(
            "Callable proxy in front of the Distance Matrix API.  Returns "
            "driving distance and traffic-aware travel time for one "
            "origin/destination pair."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.distance_proxy = DistanceProxy(
        api_key=app_settings.distance_api_key,
        upstream=DistanceMatrixClient(http, app_settings.distance_api_url),
    )

    app.add_exception_handler(ProxyError, _proxy_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(distance.router)
    app.include_router(admin.router)

    return app
