"""Compact signed JSON tokens using shared-secret HMAC algorithms."""

from .algorithms import Algorithm
from .codec import DecodePolicy, TokenCodec
from .exceptions import (
    InvalidHeaderError,
    InvalidPayloadError,
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    UnknownAlgorithmError,
)

__all__ = [
    "Algorithm",
    "DecodePolicy",
    "InvalidHeaderError",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "InvalidTokenError",
    "MalformedTokenError",
    "TokenCodec",
    "UnknownAlgorithmError",
]
