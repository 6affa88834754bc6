# topmark:header:start
#
#   project      : SrcEmit
#   file         : exit_codes.py
#   file_relpath : src/srcemit/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SrcEmit CLI.

SrcEmit aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
which signals that at least one file's text would change. Click's own parameter errors
also exit with 2; errors raised by SrcEmit itself use `USAGE_ERROR=64`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SrcEmit CLI.

    Attributes:
        SUCCESS: Successful execution; no file would change.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: At least one emitted file differs from its original text.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error (e.g., UnicodeDecodeError).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONTRACT_VIOLATION: Emission precondition violated (e.g. the virtual stdin
            stream used where a real path is required). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONTRACT_VIOLATION = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
