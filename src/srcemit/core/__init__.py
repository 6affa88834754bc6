# topmark:header:start
#
#   project      : SrcEmit
#   file         : __init__.py
#   file_relpath : src/srcemit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, dependency-light building blocks shared across SrcEmit layers."""

from __future__ import annotations
