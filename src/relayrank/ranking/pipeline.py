"""
Filter, score and rank pipeline over newline-delimited relay records.

Every line must decode into a [RelayRecord][relayrank.ranking.record.RelayRecord];
the first malformed line aborts the run with
[ParseError][relayrank.core.exceptions.ParseError]. Decoded records flow
through the eligibility filter, survivors are scored against a single
``now`` sampled for the whole run, and the full set is ranked once input
is exhausted.

Examples:
    ```python
    import sys

    for scored in rank_lines(sys.stdin):
        print(format_result(scored))
    ```
"""

from __future__ import annotations

from time import time
from typing import TYPE_CHECKING

from pydantic import ValidationError

from relayrank.core.exceptions import ParseError
from relayrank.core.logger import Logger

from .configs import RankingConfig
from .filter import check_eligibility
from .ranker import rank_candidates
from .record import RelayRecord
from .scorer import score_candidate
from .types import ScoredCandidate


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = Logger("ranking")


def parse_record(line: str, line_number: int) -> RelayRecord:
    """Decode one input line into a relay record.

    Args:
        line: JSON text of the record, without its line terminator.
        line_number: 1-based position of the line, used in diagnostics.

    Raises:
        ParseError: If the line is not a valid relay record.
    """
    try:
        return RelayRecord.model_validate_json(line)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
            for err in e.errors()
        )
        raise ParseError(errors, line_number=line_number, line=line) from e


def rank_lines(
    lines: Iterable[str],
    *,
    now: int | None = None,
    config: RankingConfig | None = None,
) -> list[ScoredCandidate]:
    """Rank the relays described by newline-delimited JSON records.

    Args:
        lines: Input lines, e.g. an open text stream.
        now: Unix time used for every age computation. Defaults to the
            current time, sampled once.
        config: Ranking settings. Defaults to ``RankingConfig()``.

    Returns:
        The top ``config.top_n`` relays, best first.

    Raises:
        ParseError: If any line is malformed.
        FatalComparisonError: If any score cannot be ordered.
    """
    if config is None:
        config = RankingConfig()
    if now is None:
        now = int(time())

    scored: list[ScoredCandidate] = []
    records = 0
    for line_number, raw in enumerate(lines, start=1):
        record = parse_record(raw.rstrip("\r\n"), line_number)
        records += 1

        candidate = check_eligibility(
            record, excluded_url_substrings=config.excluded_url_substrings
        )
        if candidate is None:
            continue
        scored.append(ScoredCandidate(candidate, score_candidate(candidate, now)))

    ranked = rank_candidates(scored, top_n=config.top_n)
    logger.info("ranking_completed", records=records, eligible=len(scored), ranked=len(ranked))
    return ranked


def format_result(scored: ScoredCandidate) -> str:
    """Render a ranked relay as ``<url> <scoring>`` for display."""
    return f"{scored.url} {scored.scoring!r}"
