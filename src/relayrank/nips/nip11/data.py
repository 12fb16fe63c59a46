"""
NIP-11 relay information data models.

Typed Pydantic models for the parts of a relay's NIP-11 information document
that ranking relies on: the operator public key, and the payment and fee
declarations that mark a relay as paid.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import StrictInt

from relayrank.nips.base import BaseData
from relayrank.nips.parsing import FieldSpec


class Nip11InfoDataFeeEntry(BaseData):
    """Single fee entry (admission, subscription, or publication)."""

    amount: StrictInt | None = None
    unit: str | None = None
    period: StrictInt | None = None
    kinds: list[StrictInt] | None = None

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(
        int_fields=frozenset({"amount", "period"}),
        str_fields=frozenset({"unit"}),
        int_list_fields=frozenset({"kinds"}),
    )


class Nip11InfoDataFees(BaseData):
    """Fee schedule categories from a NIP-11 document.

    An instance with every category empty still means the relay declared
    a ``fees`` object.
    """

    admission: list[Nip11InfoDataFeeEntry] | None = None
    subscription: list[Nip11InfoDataFeeEntry] | None = None
    publication: list[Nip11InfoDataFeeEntry] | None = None

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        if not isinstance(data, dict):
            return {}
        result: dict[str, Any] = {}
        for key in ("admission", "subscription", "publication"):
            if isinstance(data.get(key), list):
                entries = [Nip11InfoDataFeeEntry.parse(e) for e in data[key]]
                entries = [e for e in entries if e]
                if entries:
                    result[key] = entries
        return result


class Nip11InfoData(BaseData):
    """NIP-11 relay information document.

    ``fees`` keeps presence semantics: any non-null ``fees`` value in the raw
    document yields a ``Nip11InfoDataFees`` instance, even when none of its
    entries could be parsed.
    """

    name: str | None = None
    description: str | None = None
    pubkey: str | None = None
    contact: str | None = None
    software: str | None = None
    version: str | None = None
    payments_url: str | None = None
    supported_nips: list[StrictInt] | None = None
    fees: Nip11InfoDataFees | None = None

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec(
        str_fields=frozenset(
            {
                "name",
                "description",
                "pubkey",
                "contact",
                "software",
                "version",
                "payments_url",
            }
        ),
        int_list_fields=frozenset({"supported_nips"}),
    )

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        """Parse a NIP-11 document, including the nested ``fees`` object.

        Args:
            data: Raw dictionary published by the relay.

        Returns:
            Validated dictionary suitable for model construction.
        """
        result = super().parse(data)
        if isinstance(data, dict) and data.get("fees") is not None:
            result["fees"] = Nip11InfoDataFees.parse(data["fees"])
        return result

    @property
    def requires_payment(self) -> bool:
        """Whether the relay advertises a payments URL or a fee schedule."""
        return self.payments_url is not None or self.fees is not None
