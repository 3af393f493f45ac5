import hashlib
import json
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from httpx import Request

from ..models.exceptions import UnsupportedContentTypeError
from .constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    HEADER_CONTENT_TYPE,
)

_BINARY_TYPES = (bytes, bytearray, memoryview)


def media_type(content_type: Optional[str]) -> str:
    """Strip parameters from a Content-Type value.

    >>> media_type("application/json; charset=utf-8")
    'application/json'
    """
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def encode_body(content_type: Optional[str], body: Any) -> tuple[bytes, str]:
    """Serialize `body` for the given Content-Type.

    Returns:
        tuple[bytes, str]: The encoded body and the Content-Type header value to
            send with it. Only multipart changes the header, to add its boundary.

    Raises:
        UnsupportedContentTypeError: If the media type is not JSON, form or
            multipart.
        TypeError: If a form or multipart body is not a mapping.
    """
    kind = media_type(content_type)

    if kind == CONTENT_TYPE_JSON:
        encoded = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        return encoded.encode("utf-8"), content_type or kind

    if kind == CONTENT_TYPE_FORM:
        fields = _require_mapping(body, kind)
        pairs = [(key, _form_value(value)) for key, value in fields.items()]
        return urlencode(pairs).encode("ascii"), content_type or kind

    if kind == CONTENT_TYPE_MULTIPART:
        return _encode_multipart(_require_mapping(body, kind))

    raise UnsupportedContentTypeError(content_type)


def _require_mapping(body: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise TypeError(
            f"A '{kind}' body must be a mapping, got {type(body).__name__}."
        )
    return body


def _form_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_binary(value: Any) -> bool:
    return isinstance(value, _BINARY_TYPES) or hasattr(value, "read")


def _encode_multipart(fields: Mapping[str, Any]) -> tuple[bytes, str]:
    # Text parts carry no filename; binary parts are named after their key.
    files = []
    for key, value in fields.items():
        if isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        if _is_binary(value):
            files.append((key, (key, value, "application/octet-stream")))
        else:
            files.append((key, (None, _form_value(value))))

    boundary = _boundary_for(fields)
    request = Request(
        "POST",
        "http://multipart.invalid/",
        headers={HEADER_CONTENT_TYPE: f"{CONTENT_TYPE_MULTIPART}; boundary={boundary}"},
        files=files,
    )
    return request.read(), request.headers[HEADER_CONTENT_TYPE]


def _boundary_for(fields: Mapping[str, Any]) -> str:
    digest = hashlib.sha256()
    for key, value in fields.items():
        digest.update(key.encode("utf-8"))
        if isinstance(value, _BINARY_TYPES):
            digest.update(bytes(value))
        else:
            digest.update(repr(value).encode("utf-8"))
    return digest.hexdigest()[:32]
