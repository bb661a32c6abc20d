"""Tests for the jwtcodec.config package."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from safir.logging import LogLevel, Profile

from jwtcodec.algorithms import Algorithm
from jwtcodec.codec import DecodePolicy
from jwtcodec.config import CodecConfig

from .support.constants import TEST_KEY


def test_defaults() -> None:
    config = CodecConfig()
    assert config.algorithm == Algorithm.none
    assert config.key.get_secret_value() == ""
    assert config.decode_policy == DecodePolicy.verified
    assert config.log_level == LogLevel.INFO
    assert config.log_profile == Profile.production


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWTCODEC_ALGORITHM", "HS384")
    monkeypatch.setenv("JWTCODEC_KEY", TEST_KEY)
    monkeypatch.setenv("JWTCODEC_DECODE_POLICY", "eager")
    monkeypatch.setenv("JWTCODEC_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JWTCODEC_LOG_PROFILE", "development")

    config = CodecConfig()
    assert config.algorithm == Algorithm.hs384
    assert config.key.get_secret_value() == TEST_KEY
    assert TEST_KEY not in repr(config)
    assert config.decode_policy == DecodePolicy.eager
    assert config.log_level == LogLevel.DEBUG
    assert config.log_profile == Profile.development


def test_invalid_algorithm(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWTCODEC_ALGORITHM", "RS256")
    with pytest.raises(ValidationError):
        CodecConfig()


def test_create_codec() -> None:
    config = CodecConfig(
        algorithm=Algorithm.hs512,
        key=TEST_KEY,
        decode_policy=DecodePolicy.eager,
    )
    codec = config.create_codec()
    assert codec.algorithm == Algorithm.hs512
    assert codec.key == TEST_KEY.encode()
    assert codec.policy == DecodePolicy.eager
    assert codec.claims() == []

    codec.add_claim("sub", "alice")
    other = config.create_codec()
    assert other is not codec
    assert other.claims() == []

    decoder = config.create_codec()
    assert decoder.decode(codec.encode())
    assert decoder.claim("sub") == "alice"
