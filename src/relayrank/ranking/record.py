"""
Relay record decoded from one line of input.

Each input line is a JSON object describing one relay and its connection
history. Top-level fields are validated strictly: a record with a missing
URL, a negative counter or a string where an integer belongs is malformed.
The embedded NIP-11 document is relay-published and parsed leniently (see
[Nip11InfoData][relayrank.nips.nip11.data.Nip11InfoData]).
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt

from relayrank.models.relay import Relay
from relayrank.nips.nip11 import Nip11InfoData


def _to_relay(value: Any) -> Any:
    if isinstance(value, str):
        return Relay(value)
    return value


def _to_nip11(value: Any) -> Any:
    if value is None or isinstance(value, Nip11InfoData):
        return value
    if not isinstance(value, dict):
        raise ValueError(f"nip11 must be an object or null, got {type(value).__name__}")  # noqa: TRY004
    return Nip11InfoData.from_raw(value)


# Counters are unsigned 64-bit; timestamps must fit a signed 64-bit age computation
U64_MAX = 2**64 - 1
I64_MAX = 2**63 - 1

Counter = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]
Timestamp = Annotated[StrictInt, Field(ge=0, le=I64_MAX)]


class RelayRecord(BaseModel):
    """One relay and its historical connection statistics.

    Attributes:
        url: Normalized relay URL.
        success_count: Successful connection attempts.
        failure_count: Failed connection attempts.
        last_connected_at: Unix time of the latest successful connection, or
            ``None`` if never recorded.
        nip11: The relay's NIP-11 information document, if one was fetched.
        last_general_eose_at: Carried through, not used for ranking.
        rank: Carried through, not used for ranking.
        hidden: Carried through, not used for ranking.
        usage_bits: Carried through, not used for ranking.
        last_attempt_nip11: Carried through, not used for ranking.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="ignore")

    url: Annotated[Relay, BeforeValidator(_to_relay)]
    success_count: Counter
    failure_count: Counter
    last_connected_at: Timestamp | None = None
    nip11: Annotated[Nip11InfoData | None, BeforeValidator(_to_nip11)] = None

    last_general_eose_at: Timestamp | None = None
    rank: Counter = 0
    hidden: StrictBool = False
    usage_bits: Counter = 0
    last_attempt_nip11: Timestamp | None = None

    @property
    def attempts(self) -> int:
        """Total connection attempts recorded for the relay."""
        return self.success_count + self.failure_count
