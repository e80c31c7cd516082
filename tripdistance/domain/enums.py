"""Provider status codes, fixed query policy and callable error codes."""

import enum


class ProviderStatus(str, enum.Enum):
    """Status codes the Distance Matrix provider reports.

    Used both for the top-level response status and for per-element
    statuses.  Unknown codes are passed through to the caller as-is.
    """

    OK = "OK"
    INVALID_REQUEST = "INVALID_REQUEST"
    MAX_ELEMENTS_EXCEEDED = "MAX_ELEMENTS_EXCEEDED"
    MAX_DIMENSIONS_EXCEEDED = "MAX_DIMENSIONS_EXCEEDED"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ZERO_RESULTS = "ZERO_RESULTS"
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"


# Reported when the provider gave no element to take a status from.
MISSING_ELEMENT_STATUS = "ERROR"


# Fixed query policy: not caller-configurable
UNITS = "metric"
TRAVEL_MODE = "driving"
TRAFFIC_MODEL = "best_guess"


class CallableErrorCode(str, enum.Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    INTERNAL = "INTERNAL"


# Callable error code -> HTTP status of the error envelope
HTTP_STATUS_FOR_CODE: dict[CallableErrorCode, int] = {
    CallableErrorCode.INVALID_ARGUMENT: 400,
    CallableErrorCode.FAILED_PRECONDITION: 400,
    CallableErrorCode.INTERNAL: 500,
}
