# topmark:header:start
#
#   project      : SrcEmit
#   file         : identity.py
#   file_relpath : src/srcemit/emission/identity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identity of a logical input file.

A `FileIdentity` is either a real filesystem path or the virtual standard-input
stream. It is the join key between a formatted text and its original text:
`to_source_key` maps it onto the key a source cache understands, and
`ensure_real_path` guards every filesystem access.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from srcemit.constants import STDIN_DISPLAY_NAME, STDIN_SENTINEL, STDIN_SOURCE_KEY
from srcemit.emission.errors import InvalidTargetError

if TYPE_CHECKING:
    from os import PathLike

# Key type understood by a source cache: a real path, or a synthetic label.
SourceKey = Path | str


@dataclass(frozen=True, slots=True)
class FileIdentity:
    """A real path or the virtual stdin stream.

    Build instances through `FileIdentity.real`, `FileIdentity.stdin` or
    `FileIdentity.from_name`; a real identity always carries a path and the
    stdin identity never does.

    Attributes:
        path (Path | None): The filesystem path, or ``None`` for stdin.
    """

    path: Path | None = None

    def __post_init__(self) -> None:
        # A plain string path must never look like the stdin source key.
        if self.path is not None and not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def real(cls, path: str | PathLike[str]) -> FileIdentity:
        """Return the identity of a filesystem path."""
        return cls(path=Path(path))

    @classmethod
    def stdin(cls) -> FileIdentity:
        """Return the identity of the virtual standard-input stream."""
        return cls(path=None)

    @classmethod
    def from_name(cls, name: str | PathLike[str] | FileIdentity) -> FileIdentity:
        """Coerce a name into an identity; ``"-"`` designates stdin."""
        if isinstance(name, FileIdentity):
            return name
        if isinstance(name, str) and name == STDIN_SENTINEL:
            return cls.stdin()
        return cls.real(name)

    @property
    def is_stdin(self) -> bool:
        """True for the virtual standard-input stream."""
        return self.path is None

    @property
    def is_real(self) -> bool:
        """True for a filesystem path."""
        return self.path is not None

    def __str__(self) -> str:
        return STDIN_DISPLAY_NAME if self.path is None else str(self.path)


def to_source_key(identity: FileIdentity) -> SourceKey:
    """Map an identity onto a source cache key.

    Total over both cases: a real path maps to the same path, stdin maps to
    the fixed ``"stdin"`` label.
    """
    if identity.path is None:
        return STDIN_SOURCE_KEY
    return identity.path


def ensure_real_path(identity: FileIdentity) -> Path:
    """Return the filesystem path behind ``identity``.

    Raises:
        InvalidTargetError: If ``identity`` is the virtual stdin stream.
    """
    if identity.path is None:
        raise InvalidTargetError(identity)
    return identity.path
