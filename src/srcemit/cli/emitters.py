# topmark:header:start
#
#   project      : SrcEmit
#   file         : emitters.py
#   file_relpath : src/srcemit/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporting emitter used by the ``check`` command.

Lists the files whose formatted text differs from the original and closes the
batch with a one-line summary. It never writes files back, so it accepts the
stdin stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from srcemit.config.logging import get_logger
from srcemit.config.types import NewlineStyle
from srcemit.emission.emitter import BaseEmitter, EmitterResult
from srcemit.emission.newline import auto_detect_newline, newline_conflicts

if TYPE_CHECKING:
    from typing import TextIO

    from srcemit.cli.console import ConsoleLike
    from srcemit.config.logging import SrcEmitLogger
    from srcemit.emission.emitter import FormattedFile

logger: SrcEmitLogger = get_logger(__name__)


class ChangedFilesEmitter(BaseEmitter):
    """Print the name of every file that would change.

    Args:
        console (ConsoleLike): Used for styling only; text goes to the ``out`` stream.
        newline_style (NewlineStyle): Active newline policy; in verbose mode the
            line-ending transition is shown for files that conflict with it.
        verbosity_level (int): 0 lists changed files; 1 also shows the line-ending
            transition and lists unchanged files.
        quiet (bool): Write nothing; only the returned results report changes.
    """

    def __init__(
        self,
        console: ConsoleLike,
        *,
        newline_style: NewlineStyle = NewlineStyle.AUTO,
        verbosity_level: int = 0,
        quiet: bool = False,
    ) -> None:
        self.console = console
        self.newline_style = newline_style
        self.verbosity_level = verbosity_level
        self.quiet = quiet
        self.seen: int = 0
        self.changed: int = 0

    def emit_header(self, out: TextIO) -> None:
        self.seen = 0
        self.changed = 0

    def emit_formatted_file(self, out: TextIO, formatted_file: FormattedFile) -> EmitterResult:
        self.seen += 1
        name: str = str(formatted_file.identity)
        if not formatted_file.changed:
            if self.verbosity_level > 0 and not self.quiet:
                out.write(f"{self.console.styled(name, fg='green')}: unchanged\n")
            return EmitterResult(has_diff=False)

        self.changed += 1
        logger.debug("%s would change", name)
        if self.quiet:
            return EmitterResult(has_diff=True)

        line: str = self.console.styled(name, fg="yellow")
        if self.verbosity_level > 0 and newline_conflicts(
            self.newline_style, formatted_file.original_text
        ):
            before = auto_detect_newline(formatted_file.original_text)
            after = auto_detect_newline(formatted_file.formatted_text)
            line += f" ({before.label} -> {after.label})"
        out.write(line + "\n")
        return EmitterResult(has_diff=True)

    def emit_footer(self, out: TextIO) -> None:
        if self.quiet:
            return
        out.write(f"{self.changed} of {self.seen} file(s) would change.\n")
