"""Exceptions for jwtcodec."""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    "InvalidHeaderError",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "InvalidTokenError",
    "MalformedTokenError",
    "UnknownAlgorithmError",
]


class InvalidTokenError(Exception):
    """A token could not be decoded or failed verification.

    This is the base class for every reason a decode can fail.  The message
    describes the failure without including key material or claim values.
    """

    error: ClassVar[str] = "invalid_token"
    """Short machine-readable code for this failure."""


class MalformedTokenError(InvalidTokenError):
    """The token does not have three ``.``-separated segments."""

    error = "malformed_token"


class InvalidHeaderError(InvalidTokenError):
    """The header segment is not a valid token header."""

    error = "invalid_header"


class UnknownAlgorithmError(InvalidHeaderError):
    """The header names an algorithm that is not supported."""

    error = "unknown_algorithm"


class InvalidPayloadError(InvalidTokenError):
    """The payload segment is not a base64url-encoded JSON object."""

    error = "invalid_payload"


class InvalidSignatureError(InvalidTokenError):
    """The signature does not match the header and payload."""

    error = "invalid_signature"
