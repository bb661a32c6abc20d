"""Command-line interface for encoding and decoding tokens."""

from __future__ import annotations

import json
import sys
from typing import Any

import click
from safir.click import display_help

from .algorithms import Algorithm
from .codec import TokenCodec
from .config import CodecConfig
from .exceptions import InvalidTokenError

__all__ = [
    "decode",
    "encode",
    "help",
    "main",
]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Command-line interface for jwtcodec.

    Defaults for the algorithm and key come from the JWTCODEC_ALGORITHM and
    JWTCODEC_KEY environment variables.
    """


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.option(
    "--algorithm",
    type=click.Choice([a.value for a in Algorithm]),
    default=None,
    help="Signing algorithm.",
)
@click.option("--key", default=None, help="Shared secret for signing.")
@click.option(
    "--claim",
    "claims",
    multiple=True,
    metavar="NAME=VALUE",
    help="Claim to add.  VALUE is parsed as JSON if possible.",
)
def encode(
    *, algorithm: str | None, key: str | None, claims: tuple[str, ...]
) -> None:
    """Encode claims as a signed token."""
    codec = _build_codec(algorithm, key)
    for claim in claims:
        name, value = _parse_claim(claim)
        codec.add_claim(name, value)
    sys.stdout.write(codec.encode() + "\n")


@main.command()
@click.option(
    "--algorithm",
    type=click.Choice([a.value for a in Algorithm]),
    default=None,
    help="Reject tokens whose header names a different algorithm.",
)
@click.option("--key", default=None, help="Shared secret for verification.")
@click.argument("token")
def decode(*, algorithm: str | None, key: str | None, token: str) -> None:
    """Verify a token and print its claims as JSON.

    The token is verified with the algorithm named in its header.  Pass
    --algorithm to also require that algorithm, for example to refuse
    unsigned tokens.
    """
    codec = _build_codec(None, key)
    try:
        codec.decode_or_raise(token)
    except InvalidTokenError as e:
        raise click.ClickException(f"Invalid token: {e}") from e
    if algorithm and codec.algorithm != Algorithm(algorithm):
        msg = (
            f"Invalid token: algorithm is {codec.algorithm.value},"
            f" expected {algorithm}"
        )
        raise click.ClickException(msg)
    claims = codec.claims_as_dict()
    sys.stdout.write(json.dumps(claims, indent=2, sort_keys=True) + "\n")


def _build_codec(algorithm: str | None, key: str | None) -> TokenCodec:
    """Create a codec from the environment, overridden by options."""
    config = CodecConfig()
    config.configure_logging()
    codec = config.create_codec()
    if algorithm:
        codec.algorithm = Algorithm(algorithm)
    if key is not None:
        codec.key = key
    return codec


def _parse_claim(claim: str) -> tuple[str, Any]:
    name, sep, raw_value = claim.partition("=")
    if not sep or not name:
        msg = f"Claim {claim} is not of the form NAME=VALUE"
        raise click.BadParameter(msg, param_hint="--claim")
    try:
        value = json.loads(raw_value)
    except ValueError:
        value = raw_value
    return name, value
