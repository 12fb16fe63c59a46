"""Core layer: exceptions, structured logging, and YAML loading.

Depends on nothing else in relayrank and is used by the ranking layer and
the CLI.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][relayrank.core.logger.Logger].
    RelayRankError: Root of the exception hierarchy.
        See [relayrank.core.exceptions][relayrank.core.exceptions].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
"""

from .exceptions import ConfigurationError, FatalComparisonError, ParseError, RelayRankError
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "FatalComparisonError",
    "Logger",
    "ParseError",
    "RelayRankError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
