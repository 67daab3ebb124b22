from resultfetch.networking.config import RequestConfig
from resultfetch.networking.headers import (
    ExtraHeader,
    build_headers,
    normalize_extra_headers,
)


def test_json_flags_set_default_headers():
    headers = build_headers(RequestConfig(url="http://example.com"))

    assert headers == {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def test_json_flags_off_leave_headers_empty():
    config = RequestConfig(
        url="http://example.com", json_request=False, json_response=False
    )

    assert build_headers(config) == {}


def test_extra_header_overrides_json_accept():
    config = RequestConfig(
        url="http://example.com",
        extra_headers=[ExtraHeader("Accept", "text/plain")],
    )

    assert build_headers(config)["Accept"] == "text/plain"


def test_extra_headers_apply_in_order_last_wins():
    config = RequestConfig(
        url="http://example.com",
        json_request=False,
        json_response=False,
        extra_headers=[("X-Trace", "first"), ("X-Other", "1"), ("X-Trace", "last")],
    )

    headers = build_headers(config)

    assert headers == {"X-Trace": "last", "X-Other": "1"}
    assert list(headers) == ["X-Trace", "X-Other"]


def test_normalize_extra_headers_handles_none():
    assert normalize_extra_headers(None) == ()
