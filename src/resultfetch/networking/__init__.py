"""HTTP request execution with tagged outcomes."""

from .client import RequestExecutor, classify_response, request
from .config import (
    DEFAULT_REQUEST_PARAMS,
    HttpClientConfig,
    RequestConfig,
    resolve_config,
)
from .errors import NetworkError
from .headers import ExtraHeader, build_headers
from .timeout import with_timeout
from .types import (
    ApplicationError,
    Err,
    NetworkFailure,
    Ok,
    Outcome,
    Result,
    Success,
)
from .validation import is_valid_status_code

__all__ = [
    "DEFAULT_REQUEST_PARAMS",
    "ApplicationError",
    "Err",
    "ExtraHeader",
    "HttpClientConfig",
    "NetworkError",
    "NetworkFailure",
    "Ok",
    "Outcome",
    "RequestConfig",
    "RequestExecutor",
    "Result",
    "Success",
    "build_headers",
    "classify_response",
    "is_valid_status_code",
    "request",
    "resolve_config",
    "with_timeout",
]
