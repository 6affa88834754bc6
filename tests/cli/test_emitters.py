# topmark:header:start
#
#   project      : SrcEmit
#   file         : test_emitters.py
#   file_relpath : tests/cli/test_emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the reporting emitter used by ``srcemit check``."""

from __future__ import annotations

import io

from srcemit.cli.console import ClickConsole
from srcemit.cli.emitters import ChangedFilesEmitter
from srcemit.config.types import NewlineStyle
from srcemit.emission.emitter import FormattedFile
from srcemit.emission.identity import FileIdentity


def _run(emitter: ChangedFilesEmitter, *files: FormattedFile) -> str:
    out = io.StringIO()
    emitter.emit_header(out)
    for ff in files:
        emitter.emit_formatted_file(out, ff)
    emitter.emit_footer(out)
    return out.getvalue()


def test_verbose_shows_transition_for_newline_conflicts() -> None:
    """A file whose line endings conflict with the style gets the transition."""
    emitter = ChangedFilesEmitter(
        ClickConsole(enable_color=False),
        newline_style=NewlineStyle.WINDOWS,
        verbosity_level=1,
    )
    ff = FormattedFile(FileIdentity.real("a.txt"), "a\n", "a\r\n")

    assert _run(emitter, ff) == "a.txt (LF -> CRLF)\n1 of 1 file(s) would change.\n"


def test_verbose_omits_transition_without_conflict() -> None:
    """Under ``auto`` a change is never a newline conflict."""
    emitter = ChangedFilesEmitter(ClickConsole(enable_color=False), verbosity_level=1)
    ff = FormattedFile(FileIdentity.real("a.txt"), "a\n", "b\n")

    assert _run(emitter, ff) == "a.txt\n1 of 1 file(s) would change.\n"


def test_quiet_writes_nothing_but_reports_diff() -> None:
    """Quiet mode keeps the results and drops the text."""
    emitter = ChangedFilesEmitter(ClickConsole(enable_color=False), verbosity_level=1, quiet=True)
    out = io.StringIO()
    emitter.emit_header(out)
    changed = emitter.emit_formatted_file(
        out, FormattedFile(FileIdentity.real("a.txt"), "a\r\n", "a\n")
    )
    unchanged = emitter.emit_formatted_file(
        out, FormattedFile(FileIdentity.real("b.txt"), "b\n", "b\n")
    )
    emitter.emit_footer(out)

    assert changed.has_diff is True
    assert unchanged.has_diff is False
    assert (emitter.seen, emitter.changed) == (2, 1)
    assert out.getvalue() == ""
