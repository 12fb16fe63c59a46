"""
Pytest configuration and shared fixtures for relayrank tests.

Provides:
- A valid operator public key derived from a test private key
- A factory for relay record dictionaries and JSON lines
- A fixed "now" timestamp for deterministic scoring
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import pytest
from nostr_sdk import Keys

from relayrank.ranking import EligibleCandidate, RelayRecord, check_eligibility


# Valid secp256k1 test key (DO NOT USE IN PRODUCTION)
VALID_HEX_KEY = (
    "67dea2ed018072d675f5415ecfaed7d2597555e202d85b3d65ea4e58d2d92ffa"  # pragma: allowlist secret
)

NOW = 1_700_000_000


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="session")
def operator_pubkey() -> str:
    """Hex public key derived from the test private key."""
    return Keys.parse(VALID_HEX_KEY).public_key().to_hex()


@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def make_record_dict(operator_pubkey: str) -> Callable[..., dict[str, Any]]:
    """Build an eligible relay record dictionary, overriding any field."""

    def factory(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "url": "wss://relay.example.com",
            "success_count": 50,
            "failure_count": 5,
            "last_connected_at": NOW - 3600,
            "last_general_eose_at": None,
            "rank": 3,
            "hidden": False,
            "usage_bits": 0,
            "nip11": {"name": "Example", "pubkey": operator_pubkey},
            "last_attempt_nip11": NOW - 7200,
        }
        data.update(overrides)
        return data

    return factory


@pytest.fixture
def make_line(make_record_dict: Callable[..., dict[str, Any]]) -> Callable[..., str]:
    """Build one JSON input line for an eligible relay, overriding any field."""

    def factory(**overrides: Any) -> str:
        return json.dumps(make_record_dict(**overrides))

    return factory


@pytest.fixture
def make_record(make_record_dict: Callable[..., dict[str, Any]]) -> Callable[..., RelayRecord]:
    def factory(**overrides: Any) -> RelayRecord:
        return RelayRecord.model_validate(make_record_dict(**overrides))

    return factory


@pytest.fixture
def make_candidate(make_record: Callable[..., RelayRecord]) -> Callable[..., EligibleCandidate]:
    """Build an EligibleCandidate, failing the test if the record is rejected."""

    def factory(**overrides: Any) -> EligibleCandidate:
        candidate = check_eligibility(make_record(**overrides))
        assert candidate is not None
        return candidate

    return factory
