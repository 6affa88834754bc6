# topmark:header:start
#
#   project      : SrcEmit
#   file         : writer.py
#   file_relpath : src/srcemit/emission/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File emission coordinator.

`write_file` pairs a file's formatted text with its original text and hands
the pair to an emitter. Per call it performs at most one filesystem read and
exactly one call into the emitter; any error (contract violation, read failure,
emitter failure) propagates before or instead of the emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from srcemit.config.logging import get_logger
from srcemit.emission.emitter import FormattedFile
from srcemit.emission.errors import InvalidTargetError
from srcemit.emission.newline import must_bypass_cache
from srcemit.emission.resolver import read_source_text, resolve_original_text

if TYPE_CHECKING:
    from typing import TextIO

    from srcemit.config.logging import SrcEmitLogger
    from srcemit.config.types import NewlineStyle
    from srcemit.emission.cache import SourceCache
    from srcemit.emission.emitter import Emitter, EmitterResult
    from srcemit.emission.identity import FileIdentity
    from srcemit.emission.resolver import TextReader

logger: SrcEmitLogger = get_logger(__name__)


def write_file(
    identity: FileIdentity,
    formatted_text: str,
    out: TextIO,
    emitter: Emitter,
    newline_style: NewlineStyle,
    *,
    cache: SourceCache | None = None,
    read_text: TextReader = read_source_text,
) -> EmitterResult:
    """Emit one formatted file.

    Args:
        identity (FileIdentity): The file being emitted.
        formatted_text (str): Output of the formatter for this file.
        out (TextIO): Stream handed to the emitter.
        emitter (Emitter): The output sink.
        newline_style (NewlineStyle): Active newline policy; decides whether the
            source cache may be used for the original text.
        cache (SourceCache | None): Optional read-only source cache.
        read_text (TextReader): Filesystem reader used when the cache is not.

    Returns:
        EmitterResult: Whatever the emitter returned, unchanged.

    Raises:
        InvalidTargetError: If ``emitter`` writes back to disk and ``identity`` is
            stdin, or if stdin must be read from the filesystem.
    """
    requires_real_path: bool = getattr(emitter, "requires_real_path", False)
    if requires_real_path and identity.is_stdin:
        raise InvalidTargetError(identity)

    bypass_cache: bool = must_bypass_cache(newline_style, identity)
    original_text: str = resolve_original_text(
        identity,
        cache,
        bypass_cache=bypass_cache,
        read_text=read_text,
    )

    formatted_file = FormattedFile(
        identity=identity,
        original_text=original_text,
        formatted_text=formatted_text,
    )
    logger.debug(
        "Emitting %s (newline_style=%s, changed=%s)",
        identity,
        newline_style,
        formatted_file.changed,
    )
    return emitter.emit_formatted_file(out, formatted_file)
