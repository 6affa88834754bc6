# topmark:header:start
#
#   project      : SrcEmit
#   file         : conftest.py
#   file_relpath : tests/emission/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for emission tests.

Provides a recording emitter that logs every call it receives, and in-memory
stand-ins for the filesystem reader so tests can count (or forbid) reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from srcemit.emission.emitter import BaseEmitter, EmitterResult

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

    from srcemit.emission.emitter import FormattedFile


class RecordingEmitter(BaseEmitter):
    """Emitter that records the sequence of calls it receives.

    ``calls`` holds ``"header"``, ``"footer"`` and ``("file", identity_str)``
    entries; ``files`` holds every `FormattedFile` handed over. When
    ``fail_on`` names a file, emitting that file raises `RuntimeError`.
    """

    requires_real_path: ClassVar[bool] = False

    def __init__(self, *, fail_on: str | None = None) -> None:
        self.calls: list[object] = []
        self.files: list[FormattedFile] = []
        self.fail_on = fail_on

    def emit_header(self, out: TextIO) -> None:
        self.calls.append("header")
        out.write("HEADER\n")

    def emit_footer(self, out: TextIO) -> None:
        self.calls.append("footer")
        out.write("FOOTER\n")

    def emit_formatted_file(self, out: TextIO, formatted_file: FormattedFile) -> EmitterResult:
        name: str = str(formatted_file.identity)
        if self.fail_on is not None and name == self.fail_on:
            raise RuntimeError(f"emitter failed on {name}")
        self.calls.append(("file", name))
        self.files.append(formatted_file)
        out.write(f"FILE {name}\n")
        return EmitterResult(has_diff=formatted_file.changed)


class InPlaceEmitter(RecordingEmitter):
    """Recording emitter that pretends to write files back to disk."""

    requires_real_path: ClassVar[bool] = True


class FakeReader:
    """In-memory replacement for the filesystem reader.

    Args:
        texts (dict[str, str]): Original texts keyed by the path's string form.
            Unknown paths raise `FileNotFoundError`.
    """

    def __init__(self, texts: dict[str, str] | None = None) -> None:
        self.texts: dict[str, str] = dict(texts or {})
        self.reads: list[str] = []

    def __call__(self, path: Path) -> str:
        key = str(path)
        self.reads.append(key)
        if key not in self.texts:
            raise FileNotFoundError(key)
        return self.texts[key]


def forbidden_reader(path: Path) -> str:
    """Reader that fails the test when the filesystem is touched."""
    raise AssertionError(f"unexpected filesystem read of {path}")
