"""Scoring diagnostics computed for an eligible relay."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Scoring:
    """Desirability score of a relay together with the inputs that produced it.

    Computed once per candidate by
    [score_candidate()][relayrank.ranking.scorer.score_candidate] and never
    modified afterwards.

    Attributes:
        score: Comparable desirability value; higher is better.
        age_seconds: Seconds since the last successful connection. Signed, and
            very large when no connection time was ever recorded.
        attempts: Total connection attempts (successes plus failures).
        successes: Successful connection attempts.
        success_rate: ``successes / attempts``, in ``[0, 1]``.
    """

    score: float
    age_seconds: int
    attempts: int
    successes: int
    success_rate: float
