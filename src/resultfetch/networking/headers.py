"""Request header construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, NamedTuple, Tuple, Union

if TYPE_CHECKING:
    from .config import RequestConfig

JSON_CONTENT_TYPE = "application/json"


class ExtraHeader(NamedTuple):
    """One caller-supplied header, applied after the JSON defaults."""

    key: str
    value: str


HeaderInput = Union[ExtraHeader, Tuple[str, str]]


def normalize_extra_headers(
    headers: Iterable[HeaderInput] | None,
) -> tuple[ExtraHeader, ...]:
    """Coerce ``(key, value)`` pairs into an ordered tuple of ExtraHeader."""
    if not headers:
        return ()
    normalized = []
    for header in headers:
        key, value = header
        normalized.append(ExtraHeader(str(key), str(value)))
    return tuple(normalized)


def build_headers(config: RequestConfig) -> dict[str, str]:
    """Build the outgoing header set for ``config``.

    JSON defaults go in first; extra headers are applied afterwards in list
    order, so a later entry overwrites any earlier value for the same key.
    """
    headers: dict[str, str] = {}
    if config.json_request:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    if config.json_response:
        headers["Accept"] = JSON_CONTENT_TYPE
    for header in config.extra_headers:
        headers[header.key] = header.value
    return headers
