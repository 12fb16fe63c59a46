"""Candidate types passed between the filter, scorer and ranker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from nostr_sdk import PublicKey

    from relayrank.models.scoring import Scoring

    from .record import RelayRecord


@dataclass(frozen=True, slots=True)
class EligibleCandidate:
    """A relay record that passed every eligibility predicate.

    ``record.success_count`` is positive, ``record.url`` is a root endpoint,
    and ``record.nip11`` is present with no payment requirement.

    Attributes:
        record: The relay record.
        public_key: Operator public key decoded from ``record.nip11.pubkey``.
    """

    record: RelayRecord
    public_key: PublicKey

    @property
    def url(self) -> str:
        return self.record.url.url


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    """An eligible relay paired with its scoring diagnostics."""

    candidate: EligibleCandidate
    scoring: Scoring

    @property
    def url(self) -> str:
        return self.candidate.url

    @property
    def score(self) -> float:
        return self.scoring.score
