"""Test fixtures."""

from __future__ import annotations

import os

import pytest

from jwtcodec.constants import ENV_PREFIX


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any jwtcodec settings inherited from the environment."""
    for variable in list(os.environ):
        if variable.startswith(ENV_PREFIX):
            monkeypatch.delenv(variable)
