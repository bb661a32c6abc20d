"""Encode and decode signed JSON tokens."""

from __future__ import annotations

import hmac
from enum import Enum
from typing import Any

import structlog
from jwt.utils import force_bytes
from structlog.stdlib import BoundLogger

from .algorithms import Algorithm
from .constants import (
    HEADER_ALGORITHM,
    HEADER_TYPE,
    TOKEN_SEPARATOR,
    TOKEN_TYPE,
)
from .exceptions import (
    InvalidHeaderError,
    InvalidPayloadError,
    InvalidSignatureError,
    InvalidTokenError,
)
from .util import (
    base64url_decode_segment,
    base64url_encode_segment,
    dump_json_compact,
    load_json_object,
    split_token,
)

__all__ = ["DecodePolicy", "TokenCodec"]


class DecodePolicy(Enum):
    """When a decode commits the decoded header and claims to the codec."""

    verified = "verified"
    """Commit only after the signature validates.

    A failed decode leaves the algorithm and claims unchanged.
    """

    eager = "eager"
    """Commit each phase as soon as it parses.

    The claims are cleared when decoding starts, the algorithm is replaced
    once the header parses, and the claims are replaced once the payload
    parses, all before the signature is checked.  Those changes remain even
    if the decode then fails.
    """


class TokenCodec:
    """Builds and verifies compact signed tokens.

    A codec holds an algorithm, a shared secret key, and a set of claims.
    `encode` turns the current state into a token and `decode` replaces the
    claims with the contents of a token after checking its signature.

    Instances are not safe for concurrent mutation.  Use one codec per
    request or guard a shared codec with a lock.

    Parameters
    ----------
    algorithm
        Signing algorithm.
    key
        Shared secret.  A `str` is stored as its UTF-8 encoding.  There is
        no minimum length.
    policy
        When a decode commits its results to the codec.
    logger
        Logger for decode failures.  Defaults to the ``jwtcodec`` logger.
    """

    def __init__(
        self,
        algorithm: Algorithm = Algorithm.none,
        key: bytes | str = b"",
        *,
        policy: DecodePolicy = DecodePolicy.verified,
        logger: BoundLogger | None = None,
    ) -> None:
        self.algorithm = algorithm
        self.key = key
        self.policy = policy
        self._claims: dict[str, Any] = {}
        self._logger = logger or structlog.get_logger("jwtcodec")

    @property
    def algorithm(self) -> Algorithm:
        """Algorithm used to sign tokens.

        Replaced by a successful decode, or by any decode whose header parses
        when the policy is `DecodePolicy.eager`.
        """
        return self._algorithm

    @algorithm.setter
    def algorithm(self, algorithm: Algorithm) -> None:
        if not isinstance(algorithm, Algorithm):
            raise TypeError(f"Not an algorithm: {algorithm!r}")
        self._algorithm = algorithm

    @property
    def key(self) -> bytes:
        """Shared secret used to sign and verify tokens."""
        return self._key

    @key.setter
    def key(self, key: bytes | str) -> None:
        self._key = force_bytes(key)

    def __contains__(self, name: object) -> bool:
        return name in self._claims

    def add_claim(self, name: str, value: Any) -> None:
        """Add a claim, replacing any existing claim with the same name.

        Parameters
        ----------
        name
            Name of the claim.
        value
            Any JSON-representable value.

        Raises
        ------
        ValueError
            Raised if the name is empty.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Claim name must be a non-empty string")
        self._claims[name] = value

    def claim(self, name: str) -> Any:
        """Return the value of a claim, or `None` if it is not present."""
        return self._claims.get(name)

    def claims(self) -> list[str]:
        """Return the names of all claims."""
        return list(self._claims)

    def claims_as_dict(self) -> dict[str, Any]:
        """Return a shallow copy of all claims."""
        return dict(self._claims)

    def clear_claims(self) -> None:
        """Remove all claims."""
        self._claims = {}

    def contains(self, name: str) -> bool:
        """Return whether a claim with this name is present."""
        return name in self._claims

    def remove_claim(self, name: str) -> None:
        """Remove a claim if it is present."""
        self._claims.pop(name, None)

    def encode(self) -> str:
        """Encode the current claims as a signed token.

        Returns
        -------
        str
            The token, three base64url segments joined by ``.``.  The
            signature segment is empty for `Algorithm.none`.

        Raises
        ------
        TypeError
            Raised if a claim value cannot be represented in JSON.
        ValueError
            Raised if a claim value is a NaN or infinite float.
        """
        header = {
            HEADER_ALGORITHM: self._algorithm.value,
            HEADER_TYPE: TOKEN_TYPE,
        }
        signing_input = (
            base64url_encode_segment(dump_json_compact(header))
            + TOKEN_SEPARATOR
            + base64url_encode_segment(dump_json_compact(self._claims))
        )
        signature = self._sign(self._algorithm, signing_input)
        return signing_input + TOKEN_SEPARATOR + signature

    def decode(self, token: str | bytes) -> bool:
        """Decode and verify a token, replacing the current claims.

        This never raises for bad input.  Use `decode_or_raise` to find out
        why a token was rejected.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        bool
            `True` if the token parsed and its signature is valid for the
            algorithm named in its header and the current key, `False`
            otherwise.  What state a `False` return leaves behind depends
            on the decode policy, so callers should not rely on it.
        """
        try:
            self.decode_or_raise(token)
        except InvalidTokenError as e:
            self._logger.debug("Token decode failed", error=str(e))
            return False
        return True

    def decode_or_raise(self, token: str | bytes) -> None:
        """Decode and verify a token, replacing the current claims.

        Parameters
        ----------
        token
            The encoded token.

        Raises
        ------
        jwtcodec.exceptions.MalformedTokenError
            Raised if the token does not have three segments.
        jwtcodec.exceptions.InvalidHeaderError
            Raised if the header is not a valid token header.
        jwtcodec.exceptions.UnknownAlgorithmError
            Raised if the header names an unsupported algorithm.
        jwtcodec.exceptions.InvalidPayloadError
            Raised if the payload is not a JSON object.
        jwtcodec.exceptions.InvalidSignatureError
            Raised if the signature does not match.
        """
        eager = self.policy == DecodePolicy.eager
        if eager:
            self._claims = {}
        header, payload, signature = split_token(token)

        algorithm = self._parse_header(header)
        if eager:
            self._algorithm = algorithm
        claims = self._parse_payload(payload)
        if eager:
            self._claims = claims

        # The signature covers the segments exactly as they were received.
        expected = self._sign(algorithm, header + TOKEN_SEPARATOR + payload)
        if not hmac.compare_digest(expected.encode(), signature.encode()):
            raise InvalidSignatureError("Token signature does not match")

        self._algorithm = algorithm
        self._claims = claims

    def _parse_header(self, segment: str) -> Algorithm:
        """Parse the header segment and return the algorithm it names."""
        try:
            header = load_json_object(base64url_decode_segment(segment))
        except ValueError as e:
            raise InvalidHeaderError(f"Cannot parse token header: {e}") from e
        if header.get(HEADER_TYPE) != TOKEN_TYPE:
            raise InvalidHeaderError(f"Token type is not {TOKEN_TYPE}")
        if HEADER_ALGORITHM not in header:
            raise InvalidHeaderError("Token header has no algorithm")
        return Algorithm.from_name(header[HEADER_ALGORITHM])

    def _parse_payload(self, segment: str) -> dict[str, Any]:
        try:
            return load_json_object(base64url_decode_segment(segment))
        except ValueError as e:
            msg = f"Cannot parse token payload: {e}"
            raise InvalidPayloadError(msg) from e

    def _sign(self, algorithm: Algorithm, signing_input: str) -> str:
        """Return the base64url-encoded signature of the signing input."""
        signature = algorithm.sign(signing_input.encode(), self._key)
        return base64url_encode_segment(signature)
