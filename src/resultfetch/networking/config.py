"""Configuration models for the RequestExecutor interface."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .headers import ExtraHeader, normalize_extra_headers

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

# Methods allowed to carry a request body.
BODY_METHODS = frozenset(("POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"))

DEFAULT_REQUEST_PARAMS: Mapping[str, Any] = MappingProxyType(
    {
        "method": "GET",
        "json_request": True,
        "json_response": True,
        "valid_status_code_start": 200,
        "valid_status_code_end": 299,
        "timeout_ms": 12000,
    }
)


def _default_headers() -> Mapping[str, str]:
    """Return immutable empty default headers mapping."""

    return MappingProxyType({})


@dataclass(frozen=True)
class HttpClientConfig:
    """Executor-wide settings shared by every request it sends."""

    user_agent: str | None = None
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    verify_tls: bool = True

    def __post_init__(self) -> None:
        # Freeze copied headers to avoid post-init mutation side effects.
        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(dict(self.default_headers)),
        )


@dataclass(frozen=True)
class RequestConfig:
    """Description of one HTTP call.

    Field defaults mirror ``DEFAULT_REQUEST_PARAMS``. Setting
    ``valid_status_code_start`` or ``valid_status_code_end`` to a falsy
    value (``0`` or ``None``) disables range validation, so every status
    code is classified as invalid unless ``valid_status_codes`` is given.
    A ``timeout_ms`` of ``None`` falls back to the default deadline.
    """

    url: str
    method: str = "GET"
    body: Any = None
    extra_headers: Sequence[ExtraHeader] = ()
    json_request: bool = True
    json_response: bool = True
    timeout_ms: int | None = 12000
    valid_status_codes: Sequence[int] | None = None
    valid_status_code_start: int | None = 200
    valid_status_code_end: int | None = 299

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("url must be a non-empty string")

        method = (self.method or "").upper()
        if method not in HTTP_METHODS:
            raise ValueError(
                f"method must be one of {', '.join(HTTP_METHODS)}, "
                f"got {self.method!r}"
            )
        object.__setattr__(self, "method", method)

        if self.timeout_ms is None:
            object.__setattr__(
                self, "timeout_ms", DEFAULT_REQUEST_PARAMS["timeout_ms"]
            )
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")

        object.__setattr__(
            self,
            "extra_headers",
            normalize_extra_headers(self.extra_headers),
        )
        if self.valid_status_codes is not None:
            object.__setattr__(
                self, "valid_status_codes", tuple(self.valid_status_codes)
            )

    @property
    def timeout_seconds(self) -> float:
        """Timeout converted for the transport and the timer."""
        return self.timeout_ms / 1000.0

    @property
    def sends_body(self) -> bool:
        """Return True when the body is attached to the outgoing request.

        Empty containers count as a body. ``None``, ``False``, ``""`` and
        numeric zero do not.
        """
        if self.method not in BODY_METHODS:
            return False
        body = self.body
        if body is None or body is False:
            return False
        if isinstance(body, (str, int, float)):
            return bool(body)
        return True


_REQUEST_FIELDS = frozenset(f.name for f in fields(RequestConfig))


def resolve_config(params: Mapping[str, Any]) -> RequestConfig:
    """Merge caller parameters over ``DEFAULT_REQUEST_PARAMS``.

    The merge is shallow: any key present in ``params`` wins, including an
    explicit ``None``. Omitted keys take the default.
    """
    unknown = set(params) - _REQUEST_FIELDS
    if unknown:
        raise ValueError(f"unknown request parameters: {sorted(unknown)}")
    if "url" not in params:
        raise ValueError("url is required")
    merged = {**DEFAULT_REQUEST_PARAMS, **params}
    return RequestConfig(**merged)

