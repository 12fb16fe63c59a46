"""Deterministic ordering and truncation of scored relays."""

from __future__ import annotations

import math
from collections.abc import Iterable

from relayrank.core.exceptions import FatalComparisonError

from .configs import DEFAULT_TOP_N
from .types import ScoredCandidate


def _sort_key(scored: ScoredCandidate) -> tuple[float, str]:
    # Score descending, then URL ascending for equal scores
    return (-scored.score, scored.url)


def rank_candidates(
    candidates: Iterable[ScoredCandidate],
    *,
    top_n: int = DEFAULT_TOP_N,
) -> list[ScoredCandidate]:
    """Order scored relays best-first and keep the top ``top_n``.

    Equal scores are ordered by canonical URL so that identical input always
    yields identical output. A NaN score has no place in that order and
    aborts the run, even when it is the only candidate and would never be
    compared.

    Args:
        candidates: Scored relays in any order.
        top_n: Maximum number of relays to return.

    Returns:
        At most ``top_n`` relays, highest score first.

    Raises:
        FatalComparisonError: If any score is NaN, including a lone NaN
            candidate.
    """
    ranked = list(candidates)
    for scored in ranked:
        if math.isnan(scored.score):
            raise FatalComparisonError(scored.url, scored.score)

    ranked.sort(key=_sort_key)
    return ranked[:top_n]
