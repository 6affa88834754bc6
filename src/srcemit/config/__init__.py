# topmark:header:start
#
#   project      : SrcEmit
#   file         : __init__.py
#   file_relpath : src/srcemit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public configuration API for SrcEmit.

Re-exports the immutable `Config`, its `MutableConfig` builder, and the
`NewlineStyle` policy enum.
"""

from __future__ import annotations

from srcemit.config.model import Config, ConfigError, MutableConfig
from srcemit.config.types import ArgsLike, NewlineStyle

__all__ = [
    "ArgsLike",
    "Config",
    "ConfigError",
    "MutableConfig",
    "NewlineStyle",
]
