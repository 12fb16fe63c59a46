"""NIP document models.

Attributes:
    Nip11InfoData: Relay information document (NIP-11).
        See [Nip11InfoData][relayrank.nips.nip11.data.Nip11InfoData].
"""

from .base import BaseData
from .nip11 import Nip11InfoData, Nip11InfoDataFeeEntry, Nip11InfoDataFees
from .parsing import FieldSpec, parse_fields


__all__ = [
    "BaseData",
    "FieldSpec",
    "Nip11InfoData",
    "Nip11InfoDataFeeEntry",
    "Nip11InfoDataFees",
    "parse_fields",
]
