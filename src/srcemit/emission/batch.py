# topmark:header:start
#
#   project      : SrcEmit
#   file         : batch.py
#   file_relpath : src/srcemit/emission/batch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Batch driver: emit a sequence of formatted files between header and footer.

No source cache is used; every original text comes from ``read_text`` (the
filesystem by default, or an in-memory stand-in). The first error aborts the
batch: remaining files are not emitted and the footer is not written.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from srcemit.config.logging import get_logger
from srcemit.config.types import NewlineStyle
from srcemit.emission.identity import FileIdentity
from srcemit.emission.resolver import read_source_text
from srcemit.emission.writer import write_file

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from srcemit.config.logging import SrcEmitLogger
    from srcemit.config.model import Config
    from srcemit.emission.emitter import Emitter, EmitterResult
    from srcemit.emission.resolver import TextReader

logger: SrcEmitLogger = get_logger(__name__)

# A (file, formatted text) entry; plain names are coerced with `FileIdentity.from_name`.
FileRecord = tuple[FileIdentity | str | Path, str]


def write_all_files(
    records: Iterable[FileRecord],
    out: TextIO,
    emitter: Emitter,
    newline_style: NewlineStyle = NewlineStyle.AUTO,
    *,
    read_text: TextReader = read_source_text,
) -> list[EmitterResult]:
    """Emit ``records`` in order, bracketed by the emitter's header and footer.

    Args:
        records (Iterable[FileRecord]): ``(name, formatted_text)`` entries.
        out (TextIO): Stream handed to the emitter.
        emitter (Emitter): The output sink, owned by this call until the footer.
        newline_style (NewlineStyle): Newline policy applied to every entry.
        read_text (TextReader): Reader for the original texts.

    Returns:
        list[EmitterResult]: One result per record, in input order.
    """
    emitter.emit_header(out)

    results: list[EmitterResult] = []
    for name, formatted_text in records:
        identity: FileIdentity = FileIdentity.from_name(name)
        results.append(
            write_file(
                identity,
                formatted_text,
                out,
                emitter,
                newline_style,
                cache=None,
                read_text=read_text,
            )
        )

    emitter.emit_footer(out)
    logger.debug("Batch emitted %d file(s)", len(results))
    return results


def write_all_files_with_config(
    records: Iterable[FileRecord],
    out: TextIO,
    emitter: Emitter,
    config: Config,
    *,
    read_text: TextReader = read_source_text,
) -> list[EmitterResult]:
    """Run `write_all_files` with the newline style of ``config``."""
    return write_all_files(
        records,
        out,
        emitter,
        config.newline_style,
        read_text=read_text,
    )
