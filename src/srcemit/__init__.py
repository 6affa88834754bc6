# topmark:header:start
#
#   project      : SrcEmit
#   file         : __init__.py
#   file_relpath : src/srcemit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcEmit package.

SrcEmit is the source file emission layer of a code formatter: it pairs each
file's formatted text with its original text (from a source cache or from
disk), reconciles line endings according to the configured newline style, and
hands both texts to a pluggable emitter.
"""

from __future__ import annotations
