"""Response body decoding, selected by the request's Accept header."""

from __future__ import annotations

from email.message import Message
from email.parser import BytesParser
from email.policy import HTTP
from typing import Any, Callable, Mapping

import requests

from .errors import ResponseDecodeError

OCTET_STREAM = "application/octet-stream"
JSON = "application/json"
MULTIPART_FORM_DATA = "multipart/form-data"

Decoder = Callable[[requests.Response], Any]


def decode_blob(response: requests.Response) -> bytes:
    return response.content


def decode_json(response: requests.Response) -> Any:
    return response.json()


def decode_text(response: requests.Response) -> str:
    return response.text


def decode_form_data(response: requests.Response) -> dict[str, Any]:
    """Parse a ``multipart/form-data`` body into a field-name mapping.

    Text parts become ``str``; parts that carry a filename stay ``bytes``.
    A field name that appears more than once maps to a list of its values
    in body order.
    """
    content_type = response.headers.get("Content-Type", "")
    raw = (
        f"Content-Type: {content_type}\r\n\r\n".encode("latin-1")
        + response.content
    )
    message = BytesParser(policy=HTTP).parsebytes(raw)
    if message.get_content_type() != MULTIPART_FORM_DATA:
        raise ResponseDecodeError(
            f"expected {MULTIPART_FORM_DATA} response, got {content_type!r}"
        )
    if message.get_param("boundary") is None:
        raise ResponseDecodeError("multipart response has no boundary")
    if not message.is_multipart():
        raise ResponseDecodeError("multipart response could not be parsed")

    form: dict[str, Any] = {}
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if not name:
            raise ResponseDecodeError("multipart part has no field name")
        key = str(name)
        value = _part_value(part)
        if key not in form:
            form[key] = value
        elif isinstance(form[key], list):
            form[key].append(value)
        else:
            form[key] = [form[key], value]
    return form


def _part_value(part: Message) -> Any:
    payload = part.get_payload(decode=True) or b""
    if part.get_filename():
        return payload
    charset = part.get_content_charset() or "utf-8"
    try:
        return payload.decode(charset)
    except (LookupError, UnicodeDecodeError) as exc:
        raise ResponseDecodeError(f"undecodable form field: {exc}") from exc


_DECODERS: Mapping[str, Decoder] = {
    OCTET_STREAM: decode_blob,
    JSON: decode_json,
    MULTIPART_FORM_DATA: decode_form_data,
}


def select_decoder(accept: str | None) -> Decoder:
    """Return the decoder for a request ``Accept`` value.

    The match is exact; anything unrecognised, or no header, decodes as text.
    """
    if accept is None:
        return decode_text
    return _DECODERS.get(accept, decode_text)
