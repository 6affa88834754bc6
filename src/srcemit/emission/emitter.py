# topmark:header:start
#
#   project      : SrcEmit
#   file         : emitter.py
#   file_relpath : src/srcemit/emission/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emitter protocol and the values exchanged with it.

An emitter (sink) turns (original, formatted) file pairs into a user-visible
artifact: a diff, an in-place write, a report. The emission core only
orchestrates calls into it:

  * `Emitter.emit_header` once before the first file of a batch,
  * `Emitter.emit_formatted_file` once per file,
  * `Emitter.emit_footer` once after the last file.

Emitters that write back to disk may set ``requires_real_path = True``; the core
refuses to hand them the stdin stream. Emitters without the attribute are
treated as not requiring a real path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol, TextIO

if TYPE_CHECKING:
    from srcemit.emission.identity import FileIdentity


@dataclass(frozen=True, slots=True)
class FormattedFile:
    """One file's original and formatted texts, valid for a single emission.

    Attributes:
        identity (FileIdentity): Which file the texts belong to.
        original_text (str): The text before formatting.
        formatted_text (str): The text produced by the formatter.
    """

    identity: FileIdentity
    original_text: str
    formatted_text: str

    @property
    def changed(self) -> bool:
        """True when the formatted text differs from the original."""
        return self.original_text != self.formatted_text


@dataclass(frozen=True, slots=True)
class EmitterResult:
    """Outcome reported by an emitter for one file; opaque to the core.

    Attributes:
        has_diff (bool): Whether the emitter found the texts to differ.
    """

    has_diff: bool = False


class Emitter(Protocol):
    """Protocol for output sinks consuming formatted files."""

    def emit_header(self, out: TextIO) -> None:
        """Write anything that precedes the first file of a batch."""
        ...

    def emit_footer(self, out: TextIO) -> None:
        """Write anything that follows the last file of a batch."""
        ...

    def emit_formatted_file(self, out: TextIO, formatted_file: FormattedFile) -> EmitterResult:
        """Consume one formatted file and report the outcome."""
        ...

class BaseEmitter:
    """Convenience base: no header, no footer, accepts the stdin stream."""

    requires_real_path: ClassVar[bool] = False

    def emit_header(self, out: TextIO) -> None:  # noqa: B027 (optional hook)
        """No header by default."""

    def emit_footer(self, out: TextIO) -> None:  # noqa: B027 (optional hook)
        """No footer by default."""

    def emit_formatted_file(self, out: TextIO, formatted_file: FormattedFile) -> EmitterResult:
        """Subclasses must implement the per-file emission."""
        raise NotImplementedError
