# topmark:header:start
#
#   project      : SrcEmit
#   file         : newline.py
#   file_relpath : src/srcemit/emission/newline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Newline reconciliation.

Pure helpers deciding which line-ending convention applies to a file and
whether the requested `NewlineStyle` conflicts with the text on disk:

  * `must_bypass_cache` tells the resolver to ignore a source cache and read
    the file's actual bytes.
  * `effective_newline` resolves ``auto`` / ``native`` into LF or CRLF.
  * `apply_newline_style` rewrites a formatted text to the effective convention.
  * `newline_conflicts` reports whether forcing the style changes the on-disk text.

Only ``"\n"`` and ``"\r\n"`` are treated as line endings; a lone ``"\r"`` is
left untouched.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from srcemit.config.logging import get_logger
from srcemit.config.types import NewlineStyle
from srcemit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from srcemit.config.logging import SrcEmitLogger
    from srcemit.emission.identity import FileIdentity

logger: SrcEmitLogger = get_logger(__name__)

LF: str = "\n"
CRLF: str = "\r\n"


class EffectiveNewline(KeyedStrEnum):
    """The concrete line ending a `NewlineStyle` resolves to for one file."""

    UNIX = ("unix", "LF")
    WINDOWS = ("windows", "CRLF")


def must_bypass_cache(newline_style: NewlineStyle, identity: FileIdentity) -> bool:
    """Return True when the original text must be read from the filesystem.

    A source cache stores texts with normalized (LF) line endings, so any style
    other than ``auto`` has to compare against the real file. The stdin stream
    has no file to read and always goes through the cache.

    Note:
        This rule relies on the cache normalizing line endings. A cache that
        keeps original line endings would make the bypass unnecessary; revisit
        it together with such a cache rather than dropping it silently.
    """
    bypass: bool = newline_style is not NewlineStyle.AUTO and identity.is_real
    logger.trace("bypass cache for %s (newline_style=%s): %s", identity, newline_style, bypass)
    return bypass


def native_newline(platform: str | None = None) -> EffectiveNewline:
    """Return the host platform's line ending (CRLF on Windows, LF elsewhere)."""
    platform = sys.platform if platform is None else platform
    return EffectiveNewline.WINDOWS if platform == "win32" else EffectiveNewline.UNIX


def auto_detect_newline(raw_text: str, platform: str | None = None) -> EffectiveNewline:
    """Detect the convention of ``raw_text`` from its first line ending.

    Texts without any ``"\\n"`` fall back to the native convention.
    """
    pos: int = raw_text.find(LF)
    if pos == -1:
        return native_newline(platform)
    if pos > 0 and raw_text[pos - 1] == "\r":
        return EffectiveNewline.WINDOWS
    return EffectiveNewline.UNIX


def effective_newline(
    newline_style: NewlineStyle,
    raw_text: str,
    platform: str | None = None,
) -> EffectiveNewline:
    """Resolve ``newline_style`` into a concrete convention for one file.

    Args:
        newline_style (NewlineStyle): The requested policy.
        raw_text (str): The original text of the file (only used by ``auto``).
        platform (str | None): Override for ``sys.platform`` (used by ``native``
            and by ``auto`` on texts without line endings).

    Returns:
        EffectiveNewline: LF or CRLF.
    """
    if newline_style is NewlineStyle.UNIX:
        return EffectiveNewline.UNIX
    if newline_style is NewlineStyle.WINDOWS:
        return EffectiveNewline.WINDOWS
    if newline_style is NewlineStyle.NATIVE:
        return native_newline(platform)
    return auto_detect_newline(raw_text, platform)


def normalize_newlines(text: str) -> str:
    """Replace every CRLF with LF."""
    return text.replace(CRLF, LF)


def convert_newlines(text: str, target: EffectiveNewline) -> str:
    """Rewrite every line ending of ``text`` to ``target``."""
    unix: str = normalize_newlines(text)
    if target is EffectiveNewline.UNIX:
        return unix
    return unix.replace(LF, CRLF)


def apply_newline_style(
    newline_style: NewlineStyle,
    formatted_text: str,
    raw_text: str,
    platform: str | None = None,
) -> str:
    """Return ``formatted_text`` with the line endings ``newline_style`` calls for.

    Args:
        newline_style (NewlineStyle): The requested policy.
        formatted_text (str): Text produced by the formatter.
        raw_text (str): Original text of the file; ``auto`` follows its convention.
        platform (str | None): Override for ``sys.platform``.

    Returns:
        str: The reconciled text.
    """
    target: EffectiveNewline = effective_newline(newline_style, raw_text, platform)
    logger.trace("apply newline style %s -> %s", newline_style, target)
    return convert_newlines(formatted_text, target)


def newline_conflicts(
    newline_style: NewlineStyle,
    raw_text: str,
    platform: str | None = None,
) -> bool:
    """Return True when forcing ``newline_style`` would change ``raw_text``.

    ``auto`` never conflicts: it adopts whatever the file uses.
    """
    if newline_style is NewlineStyle.AUTO:
        return False
    target: EffectiveNewline = effective_newline(newline_style, raw_text, platform)
    crlf_count: int = raw_text.count(CRLF)
    if target is EffectiveNewline.UNIX:
        return crlf_count > 0
    return raw_text.count(LF) != crlf_count
