# topmark:header:start
#
#   project      : SrcEmit
#   file         : types.py
#   file_relpath : src/srcemit/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
and the emission layer can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `NewlineStyle`: the line-ending policy applied during emission.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from srcemit.core.enum_mixins import KeyedStrEnum

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class NewlineStyle(KeyedStrEnum):
    """Line-ending policy for emitted files.

    Exactly one style is active per emission call. ``AUTO`` preserves whatever
    the original file used; the other members force a convention.
    """

    AUTO = ("auto", "Preserve the original file's line endings")
    UNIX = ("unix", "Force LF line endings", ("lf",))
    WINDOWS = ("windows", "Force CRLF line endings", ("crlf", "dos"))
    NATIVE = ("native", "Use the host platform's line endings", ("platform",))
