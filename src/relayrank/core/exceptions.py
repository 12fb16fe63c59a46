"""relayrank exception hierarchy.

Every fatal condition of a ranking run is one of these types. The CLI
catches [RelayRankError][relayrank.core.exceptions.RelayRankError] as its
error boundary and turns it into a non-zero exit code.

Exception hierarchy:

```text
RelayRankError (base -- never raised directly)
├── ConfigurationError      -- unreadable YAML, invalid config values
├── ParseError              -- an input line is not a valid relay record
└── FatalComparisonError    -- a score cannot be ordered (NaN)
```

Note:
    Eligibility rejections are not errors. A record that parses but fails
    a filter predicate is dropped without raising anything.
"""

from __future__ import annotations


class RelayRankError(Exception):
    """Base exception for all relayrank errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(RelayRankError):
    """Invalid or missing configuration (YAML file, config values)."""


class ParseError(RelayRankError):
    """An input line could not be decoded into a relay record.

    Attributes:
        line_number: 1-based position of the offending line in the input.
        excerpt: Leading part of the offending line, for diagnostics.
    """

    _EXCERPT_LENGTH = 120

    def __init__(self, message: str, *, line_number: int, line: str) -> None:
        excerpt = line[: self._EXCERPT_LENGTH]
        if len(line) > self._EXCERPT_LENGTH:
            excerpt += "..."
        super().__init__(f"line {line_number}: {message} (input: {excerpt!r})")
        self.line_number = line_number
        self.excerpt = excerpt


class FatalComparisonError(RelayRankError):
    """A candidate score cannot be totally ordered against the others.

    Attributes:
        url: Canonical URL of the relay whose score is not comparable.
    """

    def __init__(self, url: str, score: float) -> None:
        super().__init__(f"score for {url} is not comparable: {score!r}")
        self.url = url
