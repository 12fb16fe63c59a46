"""Unit tests for NIP-11 data models (fees, info document)."""

import pytest
from pydantic import ValidationError

from relayrank.nips.nip11 import Nip11InfoData, Nip11InfoDataFeeEntry, Nip11InfoDataFees


class TestNip11InfoDataFromRaw:
    def test_identity_fields(self):
        data = Nip11InfoData.from_raw(
            {"name": "Relay", "pubkey": "ab" * 32, "software": "strfry", "supported_nips": [1, 11]}
        )
        assert data.name == "Relay"
        assert data.pubkey == "ab" * 32
        assert data.software == "strfry"
        assert data.supported_nips == [1, 11]
        assert data.fees is None
        assert data.payments_url is None

    def test_wrong_typed_pubkey_dropped(self):
        assert Nip11InfoData.from_raw({"pubkey": 42}).pubkey is None

    def test_unknown_fields_ignored(self):
        data = Nip11InfoData.from_raw({"name": "Relay", "limitation": {"auth_required": True}})
        assert data.model_dump(exclude_none=True) == {"name": "Relay"}

    def test_non_dict(self):
        assert Nip11InfoData.from_raw("not a document") == Nip11InfoData()


class TestPaymentRequirement:
    def test_free_relay(self):
        assert not Nip11InfoData.from_raw({"name": "Relay"}).requires_payment

    def test_payments_url(self):
        data = Nip11InfoData.from_raw({"payments_url": "https://relay.example.com/pay"})
        assert data.requires_payment

    def test_fees_with_entries(self):
        data = Nip11InfoData.from_raw(
            {"fees": {"admission": [{"amount": 1000000, "unit": "msats"}]}}
        )
        assert data.requires_payment
        assert data.fees is not None
        assert data.fees.admission == [Nip11InfoDataFeeEntry(amount=1000000, unit="msats")]

    def test_empty_fees_object_still_present(self):
        data = Nip11InfoData.from_raw({"fees": {}})
        assert data.fees == Nip11InfoDataFees()
        assert data.requires_payment

    def test_malformed_fees_still_present(self):
        assert Nip11InfoData.from_raw({"fees": "yes"}).requires_payment

    def test_null_fees_absent(self):
        data = Nip11InfoData.from_raw({"fees": None})
        assert data.fees is None
        assert not data.requires_payment


class TestNip11InfoDataFees:
    def test_invalid_entries_dropped(self):
        parsed = Nip11InfoDataFees.parse(
            {"publication": [{"kinds": [4], "amount": 100}, "junk", {"amount": "x"}]}
        )
        assert parsed == {"publication": [{"kinds": [4], "amount": 100}]}

    def test_non_list_category_dropped(self):
        assert Nip11InfoDataFees.parse({"admission": {"amount": 1}}) == {}


class TestImmutability:
    def test_frozen(self):
        data = Nip11InfoData(name="Relay")
        with pytest.raises(ValidationError):
            data.name = "Other"  # type: ignore[misc]
