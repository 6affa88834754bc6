# topmark:header:start
#
#   project      : SrcEmit
#   file         : errors.py
#   file_relpath : src/srcemit/emission/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the emission core.

Only contract violations are modelled here. Filesystem failures surface as the
builtin `OSError` family (``FileNotFoundError``, ``PermissionError``, ...) or as
``UnicodeDecodeError``, and sink failures surface as whatever the sink raised;
the core propagates both unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from srcemit.emission.identity import FileIdentity


class EmissionError(Exception):
    """Base class for failures originating in the emission core itself."""


class ContractViolationError(EmissionError):
    """A caller broke a precondition of an emission operation."""


class InvalidTargetError(ContractViolationError, ValueError):
    """A virtual input stream was used where a real filesystem path is required.

    Attributes:
        identity (FileIdentity): The offending identity.
    """

    def __init__(self, identity: FileIdentity) -> None:
        self.identity: FileIdentity = identity
        super().__init__(f"cannot format `{identity}` and emit to files")
