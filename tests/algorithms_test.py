"""Tests for the jwtcodec.algorithms package."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from jwtcodec.algorithms import Algorithm
from jwtcodec.exceptions import UnknownAlgorithmError


def test_from_name() -> None:
    assert Algorithm.from_name("none") == Algorithm.none
    assert Algorithm.from_name("HS256") == Algorithm.hs256
    assert Algorithm.from_name("HS384") == Algorithm.hs384
    assert Algorithm.from_name("HS512") == Algorithm.hs512

    for name in ("NONE", "hs256", "RS256", "ES256", "", None, 256, ["HS256"]):
        with pytest.raises(UnknownAlgorithmError):
            Algorithm.from_name(name)


def test_sign() -> None:
    message = b"header.payload"
    key = b"secret"
    assert Algorithm.none.sign(message, key) == b""
    for algorithm, digest in (
        (Algorithm.hs256, hashlib.sha256),
        (Algorithm.hs384, hashlib.sha384),
        (Algorithm.hs512, hashlib.sha512),
    ):
        expected = hmac.new(key, message, digest).digest()
        assert algorithm.sign(message, key) == expected
        assert len(expected) == digest().digest_size

    # Short and empty keys are the caller's responsibility.
    expected = hmac.new(b"", message, hashlib.sha256).digest()
    assert Algorithm.hs256.sign(message, b"") == expected
