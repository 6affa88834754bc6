# topmark:header:start
#
#   project      : SrcEmit
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Config` / `MutableConfig`: TOML loading, discovery and merge order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from srcemit.config import Config, ConfigError, MutableConfig, NewlineStyle
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_freeze_to_auto() -> None:
    """Defaults resolve to ``auto`` with inherited verbosity."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.newline_style is NewlineStyle.AUTO
    assert cfg.verbosity_level is None
    assert cfg.config_files == ("<defaults>",)


def test_freeze_thaw_roundtrip() -> None:
    """Thawing and refreezing keeps every field."""
    cfg = Config(newline_style=NewlineStyle.WINDOWS, verbosity_level=1, config_files=("x",))
    assert cfg.thaw().freeze() == cfg


def test_config_is_immutable() -> None:
    """Frozen configs reject attribute assignment."""
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.newline_style = NewlineStyle.UNIX  # type: ignore[misc]


@parametrize(
    "raw, expected",
    [
        ("auto", NewlineStyle.AUTO),
        ("unix", NewlineStyle.UNIX),
        ("LF", NewlineStyle.UNIX),
        ("crlf", NewlineStyle.WINDOWS),
        ("native", NewlineStyle.NATIVE),
    ],
)
def test_from_toml_dict_parses_newline_style(raw: str, expected: NewlineStyle) -> None:
    """Keys and aliases are accepted."""
    draft = MutableConfig.from_toml_dict({"newline_style": raw, "verbosity": 1})
    assert draft.newline_style is expected
    assert draft.verbosity_level == 1


def test_from_toml_dict_rejects_unknown_style() -> None:
    """An unknown style is a configuration error naming the valid keys."""
    with pytest.raises(ConfigError, match="expected one of: auto, unix, windows, native"):
        MutableConfig.from_toml_dict({"newline_style": "mac"})


def test_from_toml_dict_ignores_ill_typed_values() -> None:
    """Wrongly typed values are treated as unset."""
    draft = MutableConfig.from_toml_dict({"newline_style": 3, "verbosity": True})
    assert draft.newline_style is None
    assert draft.verbosity_level is None


def test_from_toml_file_srcemit_toml(tmp_path: Path) -> None:
    """``srcemit.toml`` uses a top-level ``[srcemit]`` table."""
    f = tmp_path / "srcemit.toml"
    f.write_text('[srcemit]\nnewline_style = "windows"\n', encoding="utf-8")

    draft = MutableConfig.from_toml_file(f)
    assert draft is not None
    assert draft.newline_style is NewlineStyle.WINDOWS
    assert draft.config_files == [f]


def test_from_toml_file_pyproject(tmp_path: Path) -> None:
    """``pyproject.toml`` uses ``[tool.srcemit]``."""
    f = tmp_path / "pyproject.toml"
    f.write_text('[tool.srcemit]\nnewline_style = "unix"\n', encoding="utf-8")

    draft = MutableConfig.from_toml_file(f)
    assert draft is not None
    assert draft.newline_style is NewlineStyle.UNIX


def test_from_toml_file_without_section_returns_none(tmp_path: Path) -> None:
    """Files without a SrcEmit section contribute nothing."""
    f = tmp_path / "pyproject.toml"
    f.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(f) is None


def test_from_toml_file_invalid_toml_returns_none(tmp_path: Path) -> None:
    """Unparseable TOML is logged and treated as empty."""
    f = tmp_path / "srcemit.toml"
    f.write_text("[srcemit\nnewline_style = ", encoding="utf-8")
    assert MutableConfig.from_toml_file(f) is None


def test_discovery_orders_root_most_first(tmp_path: Path) -> None:
    """Outer directories come first; pyproject precedes srcemit.toml per directory."""
    inner = tmp_path / "pkg" / "sub"
    inner.mkdir(parents=True)
    outer_cfg = tmp_path / "srcemit.toml"
    outer_cfg.write_text('[srcemit]\nnewline_style = "unix"\n', encoding="utf-8")
    inner_py = inner / "pyproject.toml"
    inner_py.write_text('[tool.srcemit]\nnewline_style = "native"\n', encoding="utf-8")
    inner_cfg = inner / "srcemit.toml"
    inner_cfg.write_text('[srcemit]\nnewline_style = "windows"\n', encoding="utf-8")

    found = MutableConfig.discover_local_config_files(inner)
    relevant = [p for p in found if tmp_path.resolve() in p.parents]
    assert relevant == [outer_cfg.resolve(), inner_py.resolve(), inner_cfg.resolve()]

    merged = MutableConfig.load_merged(anchor=inner).freeze()
    assert merged.newline_style is NewlineStyle.WINDOWS


def test_no_config_skips_discovery_but_keeps_extra_files(tmp_path: Path) -> None:
    """``no_config`` ignores discovered files; explicit files still apply."""
    (tmp_path / "srcemit.toml").write_text(
        '[srcemit]\nnewline_style = "unix"\n', encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text('[srcemit]\nverbosity = 1\n', encoding="utf-8")

    merged = MutableConfig.load_merged(
        anchor=tmp_path,
        extra_config_files=[extra],
        no_config=True,
    ).freeze()

    assert merged.newline_style is NewlineStyle.AUTO
    assert merged.verbosity_level == 1
    assert merged.config_files == ("<defaults>", extra)


def test_merge_with_last_set_value_wins() -> None:
    """Unset fields do not override lower layers."""
    base = MutableConfig(newline_style=NewlineStyle.UNIX, verbosity_level=1)
    over = MutableConfig(newline_style=None, verbosity_level=0)
    merged = base.merge_with(over)
    assert merged.newline_style is NewlineStyle.UNIX
    assert merged.verbosity_level == 0


def test_apply_cli_args_overrides_and_ignores_none() -> None:
    """CLI values override; ``None`` leaves the draft untouched."""
    draft = MutableConfig(newline_style=NewlineStyle.UNIX, verbosity_level=1)
    draft.apply_cli_args({"newline_style": None, "verbosity_level": None})
    assert draft.newline_style is NewlineStyle.UNIX
    assert draft.verbosity_level == 1

    draft.apply_cli_args({"newline_style": "dos", "verbosity_level": 0})
    assert draft.newline_style is NewlineStyle.WINDOWS
    assert draft.verbosity_level == 0

    draft.apply_cli_args({"newline_style": NewlineStyle.NATIVE})
    assert draft.newline_style is NewlineStyle.NATIVE


def test_apply_cli_args_rejects_unknown_style() -> None:
    """Invalid CLI styles raise ConfigError."""
    with pytest.raises(ConfigError, match="command line"):
        MutableConfig().apply_cli_args({"newline_style": "mac"})
