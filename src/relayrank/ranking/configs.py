"""Ranking configuration model.

Scoring constants are fixed in [relayrank.ranking.scorer][relayrank.ranking.scorer];
this model only covers the shortlist size and the URL exclusion list.

Examples:
    ```yaml
    # ranking.yaml
    top_n: 10
    excluded_url_substrings:
      - mikedilger
      - archive.example.com
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from relayrank.core.exceptions import ConfigurationError
from relayrank.core.yaml import load_yaml


DEFAULT_TOP_N = 20
DEFAULT_EXCLUDED_URL_SUBSTRINGS = ("mikedilger",)


class RankingConfig(BaseModel):
    """Settings for one ranking run.

    Attributes:
        top_n: Maximum number of relays in the output shortlist.
        excluded_url_substrings: Relays whose canonical URL contains any of
            these substrings are never ranked. The default excludes the
            maintainer's archival relay, whose statistics are inflated by
            non-representative usage.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    top_n: int = Field(default=DEFAULT_TOP_N, ge=1, description="Shortlist size")
    excluded_url_substrings: tuple[str, ...] = Field(
        default=DEFAULT_EXCLUDED_URL_SUBSTRINGS,
        description="URL substrings that exclude a relay from ranking",
    )

    @field_validator("excluded_url_substrings")
    @classmethod
    def _reject_empty_substrings(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        # An empty substring would match every URL
        if any(not s for s in value):
            raise ValueError("excluded_url_substrings must not contain empty strings")
        return value

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load a configuration from a YAML file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML, or
                holds invalid values.
        """
        try:
            return cls.model_validate(load_yaml(config_path))
        except (OSError, TypeError, yaml.YAMLError, ValidationError) as e:
            raise ConfigurationError(f"invalid config {config_path}: {e}") from e
