"""
Hard faults raised by the distance proxy.

Only caller, configuration and transport problems are exceptions.  A
provider-reported non-OK status is a normal result
(``RouteUnavailable``) and never appears here.
"""

from __future__ import annotations

from typing import Optional

from .enums import HTTP_STATUS_FOR_CODE, CallableErrorCode


class ProxyError(Exception):
    """Base class; carries the callable error code sent to the caller."""

    code: CallableErrorCode = CallableErrorCode.INTERNAL

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_FOR_CODE[self.code]


class InvalidArgument(ProxyError):
    """Origin or destination missing / empty."""

    code = CallableErrorCode.INVALID_ARGUMENT


class FailedPrecondition(ProxyError):
    """Provider API key not configured on the server."""

    code = CallableErrorCode.FAILED_PRECONDITION


class InternalError(ProxyError):
    """Transport failure or undecodable upstream body."""

    code = CallableErrorCode.INTERNAL
