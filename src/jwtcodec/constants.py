"""Constants for jwtcodec."""

__all__ = [
    "BASE64URL_REGEX",
    "ENV_PREFIX",
    "HEADER_ALGORITHM",
    "HEADER_TYPE",
    "TOKEN_SEPARATOR",
    "TOKEN_TYPE",
]

BASE64URL_REGEX = "^[A-Za-z0-9_-]*$"
"""Regex matching unpadded base64url text."""

ENV_PREFIX = "JWTCODEC_"
"""Prefix for environment variables read by the configuration."""

HEADER_ALGORITHM = "alg"
"""Header field naming the signing algorithm."""

HEADER_TYPE = "typ"
"""Header field holding the token type marker."""

TOKEN_SEPARATOR = "."
"""Separator between the header, payload, and signature segments."""

TOKEN_TYPE = "JWT"
"""The only accepted value of the ``typ`` header field."""
