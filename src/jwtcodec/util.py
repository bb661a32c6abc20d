"""General utility functions."""

from __future__ import annotations

import json
import math
import re
from typing import Any

from jwt.utils import base64url_decode, base64url_encode

from .constants import BASE64URL_REGEX, TOKEN_SEPARATOR
from .exceptions import MalformedTokenError

__all__ = [
    "base64url_decode_segment",
    "base64url_encode_segment",
    "dump_json_compact",
    "load_json_object",
    "split_token",
]


def base64url_decode_segment(segment: str) -> bytes:
    """Decode one unpadded base64url segment of a token.

    Parameters
    ----------
    segment
        The segment text, without padding.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        Raised if the segment contains characters outside the URL-safe
        alphabet or has a length no base64 encoding can produce.
    """
    if not re.fullmatch(BASE64URL_REGEX, segment):
        raise ValueError("Segment is not base64url-encoded")
    return base64url_decode(segment)


def base64url_encode_segment(data: bytes) -> str:
    """Encode bytes as an unpadded base64url segment.

    Empty input produces an empty segment.
    """
    return base64url_encode(data).decode()


def dump_json_compact(value: Any) -> bytes:
    """Serialize a value to compact UTF-8 JSON.

    Object keys are written in insertion order, so the output for a given
    mapping is stable.

    Parameters
    ----------
    value
        Any JSON-representable value.

    Returns
    -------
    bytes
        The serialized value with no insignificant whitespace.

    Raises
    ------
    TypeError
        Raised if the value contains something JSON cannot represent.
    ValueError
        Raised if the value contains a NaN or infinite float.
    """
    text = json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    return text.encode()


def load_json_object(data: bytes) -> dict[str, Any]:
    """Parse UTF-8 JSON that must contain an object.

    Parameters
    ----------
    data
        The encoded JSON.

    Returns
    -------
    dict of Any
        The parsed object.

    Raises
    ------
    ValueError
        Raised if the data is not valid UTF-8 JSON, is nested too deeply to
        parse, contains a NaN or infinite number, or is not an object.
    """
    try:
        result = json.loads(
            data.decode("utf-8"),
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except RecursionError:
        raise ValueError("JSON value is nested too deeply") from None
    if not isinstance(result, dict):
        raise ValueError("JSON value is not an object")
    return result


def split_token(token: str | bytes) -> tuple[str, str, str]:
    """Split a token into header, payload, and signature segments.

    The first two separators delimit the segments.  Everything after the
    second separator is the signature, which may be empty or may itself
    contain further separators.

    Parameters
    ----------
    token
        The encoded token.  Bytes must be ASCII.

    Returns
    -------
    tuple of str
        The header, payload, and signature segments.

    Raises
    ------
    jwtcodec.exceptions.MalformedTokenError
        Raised if the token is not ASCII or has fewer than two separators.
    """
    if isinstance(token, bytes):
        try:
            token = token.decode("ascii")
        except UnicodeDecodeError:
            raise MalformedTokenError("Token is not ASCII") from None
    elif not token.isascii():
        raise MalformedTokenError("Token is not ASCII")
    parts = token.split(TOKEN_SEPARATOR, 2)
    if len(parts) != 3:
        raise MalformedTokenError("Token does not have three segments")
    header, payload, signature = parts
    return header, payload, signature


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"JSON number {text} is out of range")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"JSON constant {name} is not allowed")
