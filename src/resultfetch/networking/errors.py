"""Error categories and internal exceptions for the networking layer."""

from __future__ import annotations

import json
from enum import Enum

import requests


class NetworkError(str, Enum):
    """Category carried by a NetworkFailure outcome."""

    TIMEOUT = "TIMEOUT"
    JSON_PARSING = "JSON_PARSING"
    OTHER = "OTHER"


class HttpClientError(Exception):
    """Base class for errors raised inside the networking layer."""


class RequestTimeoutError(HttpClientError):
    """The deadline elapsed before the operation settled."""


class ResponseDecodeError(HttpClientError):
    """A multipart response body could not be decoded."""


TIMEOUT_STATUS_CODE = 408


def classify_failure(error: BaseException) -> NetworkError:
    """Map an exception raised during dispatch or decoding to a category."""
    if isinstance(error, (RequestTimeoutError, requests.exceptions.Timeout)):
        return NetworkError.TIMEOUT
    if isinstance(
        error,
        (
            json.JSONDecodeError,
            requests.exceptions.JSONDecodeError,
        ),
    ):
        return NetworkError.JSON_PARSING
    return NetworkError.OTHER
