"""Nostr public key decoding.

Relay operators publish their public key in the NIP-11 ``pubkey`` field as
64 hex characters. Only that full form is accepted here: bech32 ``npub``
strings and shorter hex prefixes are rejected, and the decoded value must
be the x-coordinate of a point on secp256k1.

Examples:
    ```python
    pk = parse_public_key("32e1827635450ebb3c5a7d12c1f8e7b2b514439ac10a67eef3d9fd9c5c68e245")
    pk.to_hex()
    ```
"""

from __future__ import annotations

import re

from cryptography.hazmat.primitives.asymmetric import ec
from nostr_sdk import NostrSdkError, PublicKey


PUBLIC_KEY_HEX_LENGTH = 64

_HEX_PUBLIC_KEY = re.compile(rf"[0-9a-fA-F]{{{PUBLIC_KEY_HEX_LENGTH}}}")

# SEC1 compressed-point prefix; either parity is valid for an x-only key
_COMPRESSED_EVEN_Y = b"\x02"


def _ensure_on_curve(x_only: bytes) -> None:
    """Raise ``ValueError`` unless ``x_only`` is a secp256k1 x-coordinate."""
    ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), _COMPRESSED_EVEN_Y + x_only)


def parse_public_key(value: str) -> PublicKey:
    """Decode a hex-encoded Nostr public key.

    Args:
        value: Candidate public key as published by a relay.

    Returns:
        The decoded ``nostr_sdk.PublicKey``.

    Raises:
        ValueError: If the value is not exactly 64 hex characters or is not
            a point on secp256k1.
    """
    if not _HEX_PUBLIC_KEY.fullmatch(value):
        raise ValueError(f"public key must be {PUBLIC_KEY_HEX_LENGTH} hex characters")

    try:
        _ensure_on_curve(bytes.fromhex(value))
    except ValueError as e:
        raise ValueError(f"public key is not a secp256k1 point: {e}") from e

    try:
        return PublicKey.parse(value.lower())
    except NostrSdkError as e:
        raise ValueError(f"invalid public key: {e}") from e
