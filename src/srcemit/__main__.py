# topmark:header:start
#
#   project      : SrcEmit
#   file         : __main__.py
#   file_relpath : src/srcemit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SrcEmit via ``python -m srcemit``.

Delegates directly to `srcemit.cli.main.cli`, the single authoritative CLI
entry point.

Examples:
    python -m srcemit check --newline-style unix src/a.py
"""

from __future__ import annotations

from srcemit.cli.main import cli

if __name__ == "__main__":
    cli()
