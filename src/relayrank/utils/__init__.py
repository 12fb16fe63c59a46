"""Helpers that wrap third-party protocol libraries."""

from .keys import PUBLIC_KEY_HEX_LENGTH, parse_public_key


__all__ = [
    "PUBLIC_KEY_HEX_LENGTH",
    "parse_public_key",
]
