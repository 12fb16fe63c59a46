"""NIP-11 relay information document models."""

from .data import Nip11InfoData, Nip11InfoDataFeeEntry, Nip11InfoDataFees


__all__ = [
    "Nip11InfoData",
    "Nip11InfoDataFeeEntry",
    "Nip11InfoDataFees",
]
