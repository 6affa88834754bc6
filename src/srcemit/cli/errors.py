# topmark:header:start
#
#   project      : SrcEmit
#   file         : errors.py
#   file_relpath : src/srcemit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SrcEmit CLI.

Usage:
    The emission core raises builtin I/O errors and `ContractViolationError`
    unchanged; commands translate them with `error_from_exception` so that each
    failure ends the process with its sysexits-aligned `ExitCode`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from srcemit.config.model import ConfigError
from srcemit.core.exit_codes import ExitCode
from srcemit.emission.errors import ContractViolationError


class SrcEmitError(click.ClickException):
    """Base class for all SrcEmit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SrcEmitUsageError(SrcEmitError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SrcEmitConfigError(SrcEmitError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SrcEmitFileNotFoundError(SrcEmitError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SrcEmitPermissionDeniedError(SrcEmitError):
    """Error for insufficient permissions."""

    exit_code = ExitCode.PERMISSION_DENIED


class SrcEmitIOError(SrcEmitError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class SrcEmitEncodingError(SrcEmitError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class SrcEmitContractError(SrcEmitError):
    """Error for violated emission preconditions (e.g. stdin emitted to files)."""

    exit_code = ExitCode.CONTRACT_VIOLATION


def error_from_exception(exc: Exception) -> SrcEmitError:
    """Translate a core/config failure into the matching CLI error.

    Args:
        exc (Exception): The exception raised by the emission core or config layer.

    Returns:
        SrcEmitError: The CLI error carrying the matching exit code. Unknown
        exception types map to the generic `SrcEmitError`.
    """
    # Order matters: FileNotFoundError/PermissionError subclass OSError,
    # and UnicodeDecodeError subclasses ValueError (as does ConfigError).
    if isinstance(exc, FileNotFoundError):
        return SrcEmitFileNotFoundError(f"File not found: {exc.filename or exc}")
    if isinstance(exc, PermissionError):
        return SrcEmitPermissionDeniedError(f"Permission denied: {exc.filename or exc}")
    if isinstance(exc, OSError):
        return SrcEmitIOError(f"I/O error: {exc}")
    if isinstance(exc, UnicodeDecodeError):
        return SrcEmitEncodingError(f"Cannot decode input as UTF-8: {exc}")
    if isinstance(exc, ContractViolationError):
        return SrcEmitContractError(str(exc))
    if isinstance(exc, ConfigError):
        return SrcEmitConfigError(str(exc))
    return SrcEmitError(str(exc))
