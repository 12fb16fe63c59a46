"""Relay ranking: eligibility filter, scorer, ranker and the pipeline tying them together.

Attributes:
    RelayRecord: Decoded input record.
        See [RelayRecord][relayrank.ranking.record.RelayRecord].
    check_eligibility: Predicate chain excluding unsuitable relays.
    score_candidate: Scoring function for eligible relays.
    rank_candidates: Deterministic best-first ordering and truncation.
    rank_lines: End-to-end pipeline over newline-delimited JSON records.
    RankingConfig: Shortlist size and URL exclusions.
"""

from .configs import DEFAULT_EXCLUDED_URL_SUBSTRINGS, DEFAULT_TOP_N, RankingConfig
from .filter import check_eligibility
from .pipeline import format_result, parse_record, rank_lines
from .ranker import rank_candidates
from .record import RelayRecord
from .scorer import SECONDS_PER_DAY, SUCCESS_RATE_EXPONENT, score_candidate
from .types import EligibleCandidate, ScoredCandidate


__all__ = [
    "DEFAULT_EXCLUDED_URL_SUBSTRINGS",
    "DEFAULT_TOP_N",
    "SECONDS_PER_DAY",
    "SUCCESS_RATE_EXPONENT",
    "EligibleCandidate",
    "RankingConfig",
    "RelayRecord",
    "ScoredCandidate",
    "check_eligibility",
    "format_result",
    "parse_record",
    "rank_candidates",
    "rank_lines",
    "score_candidate",
]
