# topmark:header:start
#
#   project      : SrcEmit
#   file         : cache.py
#   file_relpath : src/srcemit/emission/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source caches: read-only lookup of already loaded original texts.

The emission core only ever calls `SourceCache.lookup`. `InMemorySourceCache`
is the stand-in a host uses when it already holds file contents (for instance
text read from standard input): like a parser's source map, it stores texts
with normalized LF line endings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from srcemit.config.logging import get_logger
from srcemit.emission.identity import FileIdentity, to_source_key
from srcemit.emission.newline import normalize_newlines

if TYPE_CHECKING:
    from collections.abc import Iterator

    from srcemit.config.logging import SrcEmitLogger
    from srcemit.emission.identity import SourceKey

logger: SrcEmitLogger = get_logger(__name__)


class SourceCache(Protocol):
    """Read-only capability returning the cached text for a source key."""

    def lookup(self, key: SourceKey) -> str | None:
        """Return the cached text for ``key``, or ``None`` on a miss."""
        ...


class InMemorySourceCache:
    """Dict-backed `SourceCache` with LF-normalized texts."""

    def __init__(self) -> None:
        self._texts: dict[SourceKey, str] = {}

    def add(self, identity: FileIdentity, text: str) -> None:
        """Store ``text`` for ``identity`` (CRLF normalized to LF)."""
        key: SourceKey = to_source_key(identity)
        self._texts[key] = normalize_newlines(text)
        logger.debug("Cached %d characters for %s", len(text), identity)

    def lookup(self, key: SourceKey) -> str | None:
        """Return the cached text for ``key``, or ``None`` on a miss."""
        return self._texts.get(key)

    def __contains__(self, identity: object) -> bool:
        if not isinstance(identity, FileIdentity):
            return False
        return to_source_key(identity) in self._texts

    def __len__(self) -> int:
        return len(self._texts)

    def __iter__(self) -> Iterator[SourceKey]:
        return iter(self._texts)
