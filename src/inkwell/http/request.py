"""Immutable HTTP request.

Frozen metadata only: pages are read-only, so the body is never consumed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, quote_from_bytes

# Everything a path may legally carry unescaped.  Non-ASCII bytes and
# spaces are re-escaped so that ``raw_path`` is always ASCII.
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``raw_path`` is the undecoded path component (query string removed).
    It is consumed once by the percent decoder and never mutated.
    """

    method: str
    raw_path: str
    query: str = ""
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope.

        Prefers the wire-level ``raw_path``.  Servers that omit it only
        provide the already-decoded ``path``, which is re-encoded so the
        decoder sees the same form either way.
        """
        raw: bytes = scope.get("raw_path") or b""
        if raw:
            raw = raw.split(b"?", 1)[0]
            raw_path = quote_from_bytes(raw, safe=_PATH_SAFE + "%")
        else:
            raw_path = quote(scope.get("path", "/"), safe=_PATH_SAFE)

        client = scope.get("client")
        return cls(
            method=scope["method"],
            raw_path=raw_path,
            query=scope.get("query_string", b"").decode("latin-1"),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
