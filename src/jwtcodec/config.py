"""Configuration for jwtcodec.

Settings are read from environment variables with the ``JWTCODEC_`` prefix,
so a service can select its algorithm and shared secret through its
deployment environment without code changes.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from safir.logging import LogLevel, Profile, configure_logging
from structlog.stdlib import BoundLogger

from .algorithms import Algorithm
from .codec import DecodePolicy, TokenCodec
from .constants import ENV_PREFIX

__all__ = ["CodecConfig"]


class CodecConfig(BaseSettings):
    """Configuration for building token codecs."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    algorithm: Algorithm = Field(
        Algorithm.none,
        title="Signing algorithm",
        description="Algorithm used to sign issued tokens",
    )

    key: SecretStr = Field(
        SecretStr(""),
        title="Shared secret",
        description="Secret key for signing and verifying tokens",
    )

    decode_policy: DecodePolicy = Field(
        DecodePolicy.verified,
        title="Decode policy",
        description=(
            "Whether a decode commits the decoded algorithm and claims only"
            " after the signature verifies or as each phase parses"
        ),
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
    )

    log_profile: Profile = Field(
        Profile.production,
        title="Logging profile",
        description="Production uses JSON logging, development uses text",
    )

    def configure_logging(self) -> None:
        """Configure logging based on the jwtcodec configuration."""
        configure_logging(
            name="jwtcodec", profile=self.log_profile, log_level=self.log_level
        )

    def create_codec(self, logger: BoundLogger | None = None) -> TokenCodec:
        """Create a new codec from the configuration.

        Each call returns a fresh codec with no claims, suitable for use by
        a single request.

        Parameters
        ----------
        logger
            Logger for the codec.  Defaults to the ``jwtcodec`` logger.

        Returns
        -------
        TokenCodec
            Newly-created codec.
        """
        return TokenCodec(
            self.algorithm,
            self.key.get_secret_value(),
            policy=self.decode_policy,
            logger=logger,
        )
