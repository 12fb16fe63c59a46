"""
Unit tests for ranking.filter (eligibility predicates).

Each predicate is exercised on its own against an otherwise eligible record.
"""

import pytest

from relayrank.ranking import EligibleCandidate, check_eligibility


class TestEligible:
    def test_eligible_record(self, make_record, operator_pubkey):
        candidate = check_eligibility(make_record())
        assert isinstance(candidate, EligibleCandidate)
        assert candidate.public_key.to_hex() == operator_pubkey
        assert candidate.url == "wss://relay.example.com/"

    def test_failures_alone_do_not_reject(self, make_record):
        assert check_eligibility(make_record(success_count=1, failure_count=500)) is not None

    def test_missing_last_connected_at_does_not_reject(self, make_record):
        assert check_eligibility(make_record(last_connected_at=None)) is not None

    def test_explicit_port_root_is_eligible(self, make_record):
        assert check_eligibility(make_record(url="wss://relay.example.com:7777/")) is not None


class TestRejections:
    def test_no_successes(self, make_record):
        assert check_eligibility(make_record(success_count=0, failure_count=0)) is None
        assert check_eligibility(make_record(success_count=0, failure_count=10)) is None

    @pytest.mark.parametrize(
        "url",
        [
            "wss://relay.example.com/foo",
            "wss://relay.example.com/foo/",
            "wss://relay.example.com/a/b",
            "wss://relay.example.com//",
        ],
    )
    def test_sub_path(self, make_record, url):
        assert check_eligibility(make_record(url=url)) is None

    def test_no_nip11(self, make_record):
        assert check_eligibility(make_record(nip11=None)) is None

    def test_no_pubkey(self, make_record):
        assert check_eligibility(make_record(nip11={"name": "Relay"})) is None

    @pytest.mark.parametrize(
        "pubkey",
        [
            "abcdef",
            "ab" * 31,
            "ab" * 33,
            "g" * 64,
            "f" * 64,
            "",
        ],
    )
    def test_invalid_pubkey(self, make_record, pubkey):
        assert check_eligibility(make_record(nip11={"pubkey": pubkey})) is None

    def test_payments_url(self, make_record, operator_pubkey):
        nip11 = {"pubkey": operator_pubkey, "payments_url": "https://relay.example.com/pay"}
        assert check_eligibility(make_record(nip11=nip11)) is None

    def test_fees(self, make_record, operator_pubkey):
        nip11 = {"pubkey": operator_pubkey, "fees": {"admission": [{"amount": 21, "unit": "sats"}]}}
        assert check_eligibility(make_record(nip11=nip11)) is None

    def test_empty_fees(self, make_record, operator_pubkey):
        assert check_eligibility(make_record(nip11={"pubkey": operator_pubkey, "fees": {}})) is None

    def test_default_excluded_substring(self, make_record):
        assert check_eligibility(make_record(url="wss://nostr.mikedilger.com")) is None

    def test_custom_excluded_substrings(self, make_record):
        record = make_record(url="wss://archive.example.org")
        assert check_eligibility(record, excluded_url_substrings=("archive",)) is None
        assert check_eligibility(record, excluded_url_substrings=()) is not None

    def test_rejection_does_not_log(self, make_record, caplog):
        check_eligibility(make_record(success_count=0))
        assert caplog.records == []
