"""Signing algorithms supported by the token codec."""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

from jwt.algorithms import Algorithm as SigningAlgorithm
from jwt.algorithms import HMACAlgorithm, NoneAlgorithm

from .exceptions import UnknownAlgorithmError

__all__ = ["Algorithm"]


class Algorithm(Enum):
    """Algorithm used to sign a token.

    The value of each member is the name written to the ``alg`` header
    field.  Names are case-sensitive.
    """

    none = "none"
    """No signature.  The signature segment of the token is empty."""

    hs256 = "HS256"
    """HMAC using SHA-256."""

    hs384 = "HS384"
    """HMAC using SHA-384."""

    hs512 = "HS512"
    """HMAC using SHA-512."""

    @classmethod
    def from_name(cls, name: Any) -> Self:
        """Look up an algorithm by its header name.

        Parameters
        ----------
        name
            Value of the ``alg`` header field.  Anything other than one of
            the supported names, including non-string values, is rejected.

        Returns
        -------
        Algorithm
            The corresponding algorithm.

        Raises
        ------
        jwtcodec.exceptions.UnknownAlgorithmError
            Raised if the name is not a supported algorithm.
        """
        if not isinstance(name, str):
            raise UnknownAlgorithmError("Algorithm name is not a string")
        try:
            return cls(name)
        except ValueError:
            raise UnknownAlgorithmError(f"Unknown algorithm {name}") from None

    def sign(self, message: bytes, key: bytes) -> bytes:
        """Compute the raw signature of a message.

        Parameters
        ----------
        message
            The signing input, the header and payload segments joined by a
            separator.
        key
            Shared secret.  Ignored for `Algorithm.none`.

        Returns
        -------
        bytes
            The signature, which is empty for `Algorithm.none`.
        """
        return _SIGNERS[self].sign(message, key)


_SIGNERS: dict[Algorithm, SigningAlgorithm] = {
    Algorithm.none: NoneAlgorithm(),
    Algorithm.hs256: HMACAlgorithm(HMACAlgorithm.SHA256),
    Algorithm.hs384: HMACAlgorithm(HMACAlgorithm.SHA384),
    Algorithm.hs512: HMACAlgorithm(HMACAlgorithm.SHA512),
}
"""Signing primitive for each algorithm."""
