"""
Declarative field parsing for NIP documents.

Relay-published documents are untrusted: any field may carry a value of the
wrong JSON type. Each model declares a [FieldSpec][relayrank.nips.parsing.FieldSpec]
naming which fields are expected as which type, and
[parse_fields][relayrank.nips.parsing.parse_fields] keeps only the values
that match, silently dropping the rest.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable


_SKIP: Any = object()


def _is_int(value: Any) -> bool:
    # bool is a subclass of int and must not pass as one
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_int(value: Any) -> Any:
    return value if _is_int(value) else _SKIP


def _parse_str(value: Any) -> Any:
    return value if isinstance(value, str) else _SKIP


def _parse_list(predicate: Callable[[Any], bool]) -> Callable[[Any], Any]:
    def parse(value: Any) -> Any:
        if not isinstance(value, list):
            return _SKIP
        items = [item for item in value if predicate(item)]
        return items or _SKIP

    return parse


_FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "int_fields": _parse_int,
    "str_fields": _parse_str,
    "int_list_fields": _parse_list(_is_int),
}


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Expected JSON type for each parsed field name.

    Fields not listed in any set are ignored by ``parse_fields``. List
    fields keep only their well-typed elements and are dropped when none
    remain.
    """

    int_fields: frozenset[str] = field(default_factory=frozenset)
    str_fields: frozenset[str] = field(default_factory=frozenset)
    int_list_fields: frozenset[str] = field(default_factory=frozenset)


def parse_fields(data: dict[str, Any], spec: FieldSpec) -> dict[str, Any]:
    """Parse a dictionary according to a ``FieldSpec``, dropping invalid values.

    Args:
        data: Raw dictionary from an external source.
        spec: Field type specification.

    Returns:
        Dictionary holding only the fields whose values matched their
        declared type.
    """
    result: dict[str, Any] = {}
    for spec_field in fields(spec):
        parser = _FIELD_PARSERS[spec_field.name]
        for key in getattr(spec, spec_field.name):
            if key not in data:
                continue
            value = parser(data[key])
            if value is not _SKIP:
                result[key] = value
    return result
