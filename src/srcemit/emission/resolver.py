# topmark:header:start
#
#   project      : SrcEmit
#   file         : resolver.py
#   file_relpath : src/srcemit/emission/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Original-text resolver.

Recovers the pre-formatting text of a file, either from a `SourceCache` or
from the filesystem:

  * with ``bypass_cache=False`` and a cache hit, the cached text is returned
    and the filesystem is never touched;
  * otherwise (bypass requested, no cache, or a miss) the file is read in full.

Filesystem reads are verbatim: strict UTF-8 decoding and no universal-newline
translation, so ``"\r\n"`` survives for newline reconciliation. Read errors
(``FileNotFoundError``, ``PermissionError``, other ``OSError``,
``UnicodeDecodeError``) are not handled here and reach the caller unchanged.
The stdin identity has no file behind it: resolving it without a cache hit
raises `InvalidTargetError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from srcemit.config.logging import get_logger
from srcemit.emission.identity import ensure_real_path, to_source_key

if TYPE_CHECKING:
    from pathlib import Path

    from srcemit.config.logging import SrcEmitLogger
    from srcemit.emission.cache import SourceCache
    from srcemit.emission.identity import FileIdentity

logger: SrcEmitLogger = get_logger(__name__)

# Reads the full text of a file; injectable so storage can be stood in for.
TextReader = Callable[["Path"], str]


def read_source_text(path: Path) -> str:
    """Read the entire content of ``path`` as text, preserving line endings."""
    with path.open("r", encoding="utf-8", errors="strict", newline="") as f:
        text: str = f.read()
    logger.trace("Read %d characters from %s", len(text), path)
    return text


def resolve_original_text(
    identity: FileIdentity,
    cache: SourceCache | None,
    *,
    bypass_cache: bool,
    read_text: TextReader = read_source_text,
) -> str:
    """Return the original text of ``identity``.

    Args:
        identity (FileIdentity): The file whose original text is wanted.
        cache (SourceCache | None): Optional read-only source cache.
        bypass_cache (bool): Ignore ``cache`` and read the filesystem (see
            `srcemit.emission.newline.must_bypass_cache`).
        read_text (TextReader): Filesystem reader; replaced by tests and by
            hosts that keep files in memory.

    Returns:
        str: A fresh copy of the original text.

    Raises:
        InvalidTargetError: If ``identity`` is stdin and the text is not cached.
    """
    if not bypass_cache and cache is not None:
        cached: str | None = cache.lookup(to_source_key(identity))
        if cached is not None:
            logger.debug("Original text of %s resolved from source cache", identity)
            return cached
        logger.debug("Source cache miss for %s", identity)

    path: Path = ensure_real_path(identity)
    logger.debug("Original text of %s resolved from filesystem", identity)
    return read_text(path)
