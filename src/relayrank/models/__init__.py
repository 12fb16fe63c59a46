"""Pure frozen dataclasses with no I/O.

Attributes:
    Relay: Validated, normalized WebSocket relay URL.
        See [Relay][relayrank.models.relay.Relay].
    Scoring: Score and diagnostic fields of a ranked relay.
        See [Scoring][relayrank.models.scoring.Scoring].
"""

from .relay import ROOT_PATH, Relay
from .scoring import Scoring


__all__ = [
    "ROOT_PATH",
    "Relay",
    "Scoring",
]
