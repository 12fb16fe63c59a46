"""
Validated Nostr relay URL.

Parses and normalizes WebSocket relay URLs (``ws://`` or ``wss://``) with
RFC 3986 rules. The path component is kept exactly as normalized so that
callers can tell a root endpoint (``/``) from a sub-path resource.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from rfc3986 import uri_reference
from rfc3986.exceptions import UnpermittedComponentError, ValidationError
from rfc3986.validators import Validator


ROOT_PATH = "/"


@dataclass(frozen=True, slots=True)
class Relay:
    """Immutable representation of a Nostr relay URL.

    Attributes:
        url: Canonical URL, ``scheme://host[:port]path``. Root relays always
            end with ``/``.
        scheme: URL scheme (``ws`` or ``wss``).
        host: Hostname or IP address (brackets stripped for IPv6).
        port: Explicit non-default port number, or ``None``.
        path: URL path component; ``"/"`` for a root endpoint.

    Raises:
        ValueError: If the URL is malformed, uses an unsupported scheme,
            carries a query string or fragment, or contains null bytes.

    Examples:
        ```python
        relay = Relay("wss://Relay.Damus.io:443")
        relay.url       # 'wss://relay.damus.io/'
        relay.path      # '/'
        Relay("wss://nostr.example.com/inbox").path  # '/inbox'
        ```
    """

    raw_url: str = field(repr=False)

    url: str = field(init=False)
    scheme: str = field(init=False)
    host: str = field(init=False)
    port: int | None = field(init=False)
    path: str = field(init=False)

    _DEFAULT_PORTS: ClassVar[dict[str, int]] = {"ws": 80, "wss": 443}

    def __post_init__(self) -> None:
        if not isinstance(self.raw_url, str):
            raise TypeError(f"raw_url must be a str, got {type(self.raw_url).__name__}")
        if "\x00" in self.raw_url:
            raise ValueError("Relay URL contains null bytes")

        parsed = self._parse(self.raw_url)

        # Bypass frozen restriction to set computed fields
        for name, value in parsed.items():
            object.__setattr__(self, name, value)

    @classmethod
    def _parse(cls, raw: str) -> dict[str, Any]:
        """Parse and normalize a raw relay URL string.

        Args:
            raw: Raw URL string (e.g., ``"wss://relay.example.com:8080/path"``).

        Returns:
            Dictionary with ``url``, ``scheme``, ``host``, ``port`` and ``path``.

        Raises:
            ValueError: If the scheme is not ``ws``/``wss`` or the URI is invalid.
        """
        uri = uri_reference(raw.strip()).normalize()

        validator = (
            Validator()
            .require_presence_of("scheme", "host")
            .allow_schemes("ws", "wss")
            .check_validity_of("scheme", "host", "port", "path")
        )

        try:
            validator.validate(uri)
        except UnpermittedComponentError:
            raise ValueError("Invalid scheme: must be ws or wss") from None
        except ValidationError as e:
            raise ValueError(f"Invalid URL: {e}") from None

        if uri.query is not None:
            raise ValueError(f"Relay URL must not contain a query string: ?{uri.query}")
        if uri.fragment is not None:
            raise ValueError(f"Relay URL must not contain a fragment: #{uri.fragment}")

        scheme = uri.scheme
        host = (uri.host or "").strip("[]")
        if not host:
            raise ValueError("Invalid URL: empty host")

        port = int(uri.port) if uri.port else None
        if port == cls._DEFAULT_PORTS[scheme]:
            port = None

        path = uri.path or ROOT_PATH

        formatted_host = f"[{host}]" if ":" in host else host
        authority = f"{formatted_host}:{port}" if port else formatted_host

        return {
            "url": f"{scheme}://{authority}{path}",
            "scheme": scheme,
            "host": host,
            "port": port,
            "path": path,
        }

    @property
    def is_root(self) -> bool:
        """Whether the URL points at the host's root endpoint."""
        return self.path == ROOT_PATH

    def __str__(self) -> str:
        return self.url
