# topmark:header:start
#
#   project      : SrcEmit
#   file         : __init__.py
#   file_relpath : src/srcemit/emission/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source file emission.

Reconciles a file's formatted text against its original text and forwards both
to a pluggable emitter. Leaf first:

  * `srcemit.emission.newline`: newline policy decisions (pure).
  * `srcemit.emission.identity` / `srcemit.emission.cache` /
    `srcemit.emission.resolver`: recovery of the original text.
  * `srcemit.emission.writer`: per-file coordination (`write_file`).
  * `srcemit.emission.batch`: header / files / footer driver (`write_all_files`).
"""

from __future__ import annotations

from srcemit.emission.batch import FileRecord, write_all_files, write_all_files_with_config
from srcemit.emission.cache import InMemorySourceCache, SourceCache
from srcemit.emission.emitter import BaseEmitter, Emitter, EmitterResult, FormattedFile
from srcemit.emission.errors import ContractViolationError, EmissionError, InvalidTargetError
from srcemit.emission.identity import FileIdentity, SourceKey, ensure_real_path, to_source_key
from srcemit.emission.newline import (
    EffectiveNewline,
    apply_newline_style,
    effective_newline,
    must_bypass_cache,
    newline_conflicts,
)
from srcemit.emission.resolver import read_source_text, resolve_original_text
from srcemit.emission.writer import write_file

__all__ = [
    "BaseEmitter",
    "ContractViolationError",
    "EffectiveNewline",
    "EmissionError",
    "Emitter",
    "EmitterResult",
    "FileIdentity",
    "FileRecord",
    "FormattedFile",
    "InMemorySourceCache",
    "InvalidTargetError",
    "SourceCache",
    "SourceKey",
    "apply_newline_style",
    "effective_newline",
    "ensure_real_path",
    "must_bypass_cache",
    "newline_conflicts",
    "read_source_text",
    "resolve_original_text",
    "to_source_key",
    "write_all_files",
    "write_all_files_with_config",
    "write_file",
]
