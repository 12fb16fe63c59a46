"""
Eligibility filter applied to every decoded relay record.

A record is rejected at the first failing predicate. Rejection is silent:
no exception, no log line. Only relays that are provably reachable, sit at
a root endpoint, identify their operator and are free to use are ranked.
"""

from __future__ import annotations

from collections.abc import Iterable

from relayrank.utils.keys import parse_public_key

from .configs import DEFAULT_EXCLUDED_URL_SUBSTRINGS
from .record import RelayRecord
from .types import EligibleCandidate


def check_eligibility(
    record: RelayRecord,
    *,
    excluded_url_substrings: Iterable[str] = DEFAULT_EXCLUDED_URL_SUBSTRINGS,
) -> EligibleCandidate | None:
    """Decide whether a relay record may be ranked.

    Args:
        record: Decoded relay record.
        excluded_url_substrings: Relays whose canonical URL contains any of
            these substrings are rejected.

    Returns:
        An ``EligibleCandidate`` carrying the decoded operator key, or
        ``None`` if the record is rejected.
    """
    # Never connected successfully
    if record.success_count == 0:
        return None

    # Sub-paths are distinct resources, not canonical relay endpoints
    if not record.url.is_root:
        return None

    nip11 = record.nip11
    if nip11 is None:
        return None

    if nip11.pubkey is None:
        return None
    try:
        public_key = parse_public_key(nip11.pubkey)
    except ValueError:
        return None

    if nip11.requires_payment:
        return None

    if any(s in record.url.url for s in excluded_url_substrings):
        return None

    return EligibleCandidate(record=record, public_key=public_key)
