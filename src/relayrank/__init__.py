r"""relayrank -- rank Nostr relays by connection reliability and freshness.

Reads relay records (one JSON object per line), drops relays that are
unreachable, non-root, anonymous or paid, scores the rest from their
connection history, and prints the best twenty.

Imports flow strictly downward:

```text
             ranking          Filter, scorer, ranker, pipeline
            /   |   \
         core  nips  utils    Errors/logging/YAML, NIP-11, key decoding
            \   |   /
             models           Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from relayrank import rank_lines``) use lazy
    loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("relayrank")

__all__ = [
    "EligibleCandidate",
    "Logger",
    "Nip11InfoData",
    "RankingConfig",
    "Relay",
    "RelayRecord",
    "ScoredCandidate",
    "Scoring",
    "check_eligibility",
    "rank_candidates",
    "rank_lines",
    "score_candidate",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Logger": ("relayrank.core", "Logger"),
    "Relay": ("relayrank.models", "Relay"),
    "Scoring": ("relayrank.models", "Scoring"),
    "Nip11InfoData": ("relayrank.nips", "Nip11InfoData"),
    "EligibleCandidate": ("relayrank.ranking", "EligibleCandidate"),
    "RankingConfig": ("relayrank.ranking", "RankingConfig"),
    "RelayRecord": ("relayrank.ranking", "RelayRecord"),
    "ScoredCandidate": ("relayrank.ranking", "ScoredCandidate"),
    "check_eligibility": ("relayrank.ranking", "check_eligibility"),
    "rank_candidates": ("relayrank.ranking", "rank_candidates"),
    "rank_lines": ("relayrank.ranking", "rank_lines"),
    "score_candidate": ("relayrank.ranking", "score_candidate"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'relayrank' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
