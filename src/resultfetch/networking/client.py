"""Request executor for the resultfetch networking layer.

The executor turns a RequestConfig into exactly one Outcome. Transport,
timeout and decode failures never escape as exceptions; they come back as a
NetworkFailure so callers can branch on ``outcome.status``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import requests

from .config import HttpClientConfig, RequestConfig, resolve_config
from .decoding import select_decoder
from .errors import TIMEOUT_STATUS_CODE, NetworkError, classify_failure
from .headers import build_headers
from .timeout import with_timeout
from .types import ApplicationError, Err, NetworkFailure, Outcome, Success
from .validation import is_valid_status_code

logger = logging.getLogger(__name__)


def classify_response(
    config: RequestConfig,
    status_code: int,
    data: Any,
    headers: Mapping[str, str],
) -> Success | ApplicationError:
    """Classify decoded response data against the config's validity rule."""
    valid = is_valid_status_code(
        status_code,
        valid_status_codes=config.valid_status_codes,
        valid_status_code_start=config.valid_status_code_start,
        valid_status_code_end=config.valid_status_code_end,
    )
    if valid:
        return Success(status_code=status_code, data=data, headers=headers)
    return ApplicationError(status_code=status_code, error_data=data)


class RequestExecutor:
    """Send one request per ``execute`` call and return a tagged Outcome.

    The executor owns a ``requests.Session``; use it as a context manager or
    call ``close`` when done.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        """Create a new RequestExecutor.

        Args:
            config: Executor-wide settings (user agent, default headers, TLS).
        """
        self._config = config or HttpClientConfig()
        self._session = requests.Session()
        if self._config.user_agent:
            self._session.headers["User-Agent"] = self._config.user_agent
        self._session.headers.update(self._config.default_headers)

    def __enter__(self) -> RequestExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    @staticmethod
    def _encode_body(config: RequestConfig) -> Any:
        """Return the payload to send, or None when no body is attached."""
        if not config.sends_body:
            return None
        if config.json_request:
            return json.dumps(config.body)
        return config.body

    def _send(
        self,
        config: RequestConfig,
        headers: Mapping[str, str],
        data: Any,
    ) -> requests.Response:
        return self._session.request(
            config.method,
            config.url,
            headers=dict(headers),
            data=data,
            timeout=config.timeout_seconds,
            verify=self._config.verify_tls,
        )

    def _network_failure(
        self,
        config: RequestConfig,
        error: BaseException,
        status_code: int | None,
    ) -> NetworkFailure:
        category = classify_failure(error)
        if category is NetworkError.TIMEOUT:
            status_code = TIMEOUT_STATUS_CODE
        logger.warning(
            "%s %s failed with %s (%s: %s)",
            config.method,
            config.url,
            category.value,
            type(error).__name__,
            error,
        )
        return NetworkFailure(network_error=category, status_code=status_code)

    def execute(self, config: RequestConfig) -> Outcome:
        """Perform the request described by ``config``.

        Args:
            config: Resolved request parameters.

        Returns:
            Success when the status code is valid, ApplicationError when the
            server answered with an invalid code, NetworkFailure otherwise.
        """
        headers = build_headers(config)
        status_code: int | None = None
        logger.debug(
            "dispatching %s %s (timeout_ms=%s)",
            config.method,
            config.url,
            config.timeout_ms,
        )

        try:
            data = self._encode_body(config)
            raced = with_timeout(
                lambda: self._send(config, headers, data),
                config.timeout_seconds,
            )
            if isinstance(raced, Err):
                return self._network_failure(config, raced.error, status_code)

            response = raced.value
            status_code = response.status_code
            response_headers = dict(response.headers)
            decoder = select_decoder(headers.get("Accept"))
            decoded = decoder(response)
        except Exception as exc:
            return self._network_failure(config, exc, status_code)

        outcome = classify_response(
            config, status_code, decoded, response_headers
        )
        logger.debug(
            "%s %s -> %s (%s)",
            config.method,
            config.url,
            outcome.status,
            status_code,
        )
        return outcome


def request(
    url: str,
    *,
    client_config: HttpClientConfig | None = None,
    **params: Any,
) -> Outcome:
    """Resolve ``params`` over the defaults and execute a single request.

    Raises:
        ValueError: if the parameters do not form a valid RequestConfig.
    """
    config = resolve_config({"url": url, **params})
    with RequestExecutor(client_config) as executor:
        return executor.execute(config)
