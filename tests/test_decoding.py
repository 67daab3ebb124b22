import pytest
import requests
from requests.structures import CaseInsensitiveDict

from resultfetch.networking.decoding import (
    decode_blob,
    decode_form_data,
    decode_json,
    decode_text,
    select_decoder,
)
from resultfetch.networking.errors import ResponseDecodeError


def _response(content: bytes, content_type: str = "text/plain") -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response._content = content
    response.headers = CaseInsensitiveDict({"Content-Type": content_type})
    response.encoding = "utf-8"
    return response


@pytest.mark.parametrize(
    "accept, decoder",
    [
        ("application/octet-stream", decode_blob),
        ("application/json", decode_json),
        ("multipart/form-data", decode_form_data),
        ("text/plain", decode_text),
        ("application/json; charset=utf-8", decode_text),
        (None, decode_text),
    ],
)
def test_select_decoder_uses_request_accept(accept, decoder):
    assert select_decoder(accept) is decoder


def test_decode_blob_returns_raw_bytes():
    assert decode_blob(_response(b"\x00\x01")) == b"\x00\x01"


def test_decode_json_parses_body():
    assert decode_json(_response(b'{"a": [1, 2]}')) == {"a": [1, 2]}


def test_decode_json_raises_on_invalid_body():
    with pytest.raises(requests.exceptions.JSONDecodeError):
        decode_json(_response(b"<html>nope</html>"))


def test_decode_form_data_parses_fields_and_files():
    body = (
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="title"\r\n'
        b"\r\n"
        b"hello\r\n"
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="upload"; filename="a.bin"\r\n'
        b"Content-Type: application/octet-stream\r\n"
        b"\r\n"
        b"\x01\x02\r\n"
        b"--XyZ--\r\n"
    )
    response = _response(body, "multipart/form-data; boundary=XyZ")

    assert decode_form_data(response) == {
        "title": "hello",
        "upload": b"\x01\x02",
    }


def test_decode_form_data_rejects_non_multipart_response():
    with pytest.raises(ResponseDecodeError):
        decode_form_data(_response(b"plain", "text/plain"))


def test_decode_form_data_requires_boundary():
    with pytest.raises(ResponseDecodeError):
        decode_form_data(_response(b"", "multipart/form-data"))


def test_decode_form_data_accepts_mixed_case_boundary_param():
    body = (
        b"--AbC\r\n"
        b'Content-Disposition: form-data; name="q"\r\n'
        b"\r\n"
        b"x\r\n"
        b"--AbC--\r\n"
    )
    response = _response(body, "multipart/form-data; Boundary=AbC")

    assert decode_form_data(response) == {"q": "x"}


def test_decode_form_data_collects_repeated_fields():
    body = (
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="id"\r\n'
        b"\r\n"
        b"1\r\n"
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="id"\r\n'
        b"\r\n"
        b"2\r\n"
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="id"\r\n'
        b"\r\n"
        b"3\r\n"
        b"--XyZ--\r\n"
    )
    response = _response(body, "multipart/form-data; boundary=XyZ")

    assert decode_form_data(response) == {"id": ["1", "2", "3"]}
