# topmark:header:start
#
#   project      : SrcEmit
#   file         : constants.py
#   file_relpath : src/srcemit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcEmit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    SRCEMIT_VERSION: str = get_version("srcemit")
except PackageNotFoundError:  # running from a source checkout
    SRCEMIT_VERSION = "0.0.0"

# Name shown to users for the virtual standard-input stream
STDIN_DISPLAY_NAME: Final[str] = "<stdin>"

# Key under which a source cache stores the standard-input text
STDIN_SOURCE_KEY: Final[str] = "stdin"

# CLI sentinel meaning "read content from standard input"
STDIN_SENTINEL: Final[str] = "-"
