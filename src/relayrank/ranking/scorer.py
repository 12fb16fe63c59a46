"""
Relay scoring.

Turns the connection history of an eligible relay into one comparable
number::

    score = success_rate ** 1.414 * log2(attempts) ** 2 / (1 + age_seconds / 86400)

* ``success_rate ** 1.414`` rewards high success rates super-linearly.
* ``log2(attempts) ** 2`` grows with sample size, sub-linearly. A relay
  with a single attempt scores exactly ``0.0``.
* The age divisor doubles after one day without a successful connection.

A relay with no recorded ``last_connected_at`` is aged from the Unix epoch.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from relayrank.models.scoring import Scoring


if TYPE_CHECKING:
    from .types import EligibleCandidate


SUCCESS_RATE_EXPONENT = 1.414
SECONDS_PER_DAY = 86400.0


def _divide(numerator: float, divisor: float) -> float:
    """IEEE-754 division: a zero divisor gives NaN or a signed infinity."""
    if divisor == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, divisor)
    return numerator / divisor


def score_candidate(candidate: EligibleCandidate, now: int) -> Scoring:
    """Score an eligible relay at a given point in time.

    Pure in ``(candidate, now)``.

    Args:
        candidate: Relay that passed the eligibility filter, so
            ``success_count > 0`` and ``attempts`` cannot be zero.
        now: Current Unix time in seconds.

    Returns:
        The relay's ``Scoring``.
    """
    record = candidate.record
    last_connected_at = record.last_connected_at if record.last_connected_at is not None else 0

    age_seconds = now - last_connected_at
    attempts = record.attempts
    successes = record.success_count
    success_rate = successes / attempts
    log_attempts = math.log2(attempts)

    age_penalty_divisor = 1.0 + age_seconds / SECONDS_PER_DAY
    score = _divide(
        success_rate**SUCCESS_RATE_EXPONENT * log_attempts * log_attempts,
        age_penalty_divisor,
    )

    return Scoring(
        score=score,
        age_seconds=age_seconds,
        attempts=attempts,
        successes=successes,
        success_rate=success_rate,
    )
