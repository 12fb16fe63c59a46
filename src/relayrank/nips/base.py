"""
Shared base class for NIP data models.

[BaseData][relayrank.nips.base.BaseData] is a frozen Pydantic model whose
``parse()`` class method turns an untrusted dictionary into clean
constructor arguments using the model's declared
[FieldSpec][relayrank.nips.parsing.FieldSpec].
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from .parsing import FieldSpec, parse_fields


class BaseData(BaseModel):
    """Base class for NIP data models with declarative field parsing.

    Subclasses declare ``_FIELD_SPEC`` and may override ``parse()`` for
    nested objects.
    """

    model_config = ConfigDict(frozen=True)

    _FIELD_SPEC: ClassVar[FieldSpec] = FieldSpec()

    @classmethod
    def parse(cls, data: Any) -> dict[str, Any]:
        """Parse arbitrary data into validated constructor arguments.

        Invalid or unrecognized values are dropped rather than raising, so
        this is safe for relay-published documents.

        Args:
            data: Raw dictionary from an external source.

        Returns:
            A cleaned dictionary containing only valid fields.
        """
        if not isinstance(data, dict):
            return {}
        return parse_fields(data, cls._FIELD_SPEC)

    @classmethod
    def from_raw(cls, data: Any) -> Self:
        """Build an instance from untrusted data via ``parse()``."""
        return cls.model_validate(cls.parse(data))
