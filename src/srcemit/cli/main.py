# topmark:header:start
#
#   project      : SrcEmit
#   file         : main.py
#   file_relpath : src/srcemit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI for SrcEmit.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- ``check`` runs files through the emission core with a formatter that only
  reconciles line endings, and reports which files would change.

Examples:

    $ srcemit check --newline-style unix src/a.py src/b.py
    $ cat a.py | srcemit check -
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from srcemit.cli.console import ClickConsole
from srcemit.cli.emitters import ChangedFilesEmitter
from srcemit.cli.errors import SrcEmitUsageError, error_from_exception
from srcemit.cli.options import (
    LOG_LEVELS,
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    newline_style_option,
    resolve_color_mode,
    resolve_verbosity,
)
from srcemit.config.logging import get_logger, resolve_env_log_level, setup_logging
from srcemit.config.model import ConfigError, MutableConfig
from srcemit.constants import SRCEMIT_VERSION, STDIN_SENTINEL
from srcemit.core.exit_codes import ExitCode
from srcemit.emission.cache import InMemorySourceCache
from srcemit.emission.errors import ContractViolationError
from srcemit.emission.identity import FileIdentity, ensure_real_path, to_source_key
from srcemit.emission.newline import apply_newline_style, normalize_newlines
from srcemit.emission.resolver import read_source_text
from srcemit.emission.writer import write_file

if TYPE_CHECKING:
    from srcemit.cli.console import ConsoleLike
    from srcemit.config.logging import SrcEmitLogger
    from typing import TextIO

    from srcemit.config.model import Config
    from srcemit.emission.emitter import EmitterResult

logger: SrcEmitLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging follows SRCEMIT_LOG_LEVEL; -v flags only raise program output.
    setup_logging(level=resolve_env_log_level())

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SrcEmit CLI",
)
@click.version_option(SRCEMIT_VERSION, "--version", prog_name="srcemit")
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the SrcEmit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'srcemit check [PATHS...]' to check line endings.")
        console.print()
        console.print(ctx.get_help())


def _build_config(
    *,
    newline_style: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    verbosity_level: int,
) -> Config:
    """Merge defaults, discovered/explicit config files and CLI overrides."""
    draft: MutableConfig = MutableConfig.load_merged(
        anchor=Path.cwd(),
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_cli_args(
        {
            "newline_style": newline_style,
            # Only -v overrides a configured verbosity
            "verbosity_level": 1 if verbosity_level <= LOG_LEVELS["INFO"] else None,
        }
    )
    return draft.freeze()


def _read_stdin_text() -> str:
    """Read standard input verbatim (no newline translation) as UTF-8."""
    raw: bytes = click.get_binary_stream("stdin").read()
    return raw.decode("utf-8")


@cli.command(
    name="check",
    help="Report files whose line endings do not follow the newline style.",
    epilog="""\
Use '-' as a PATH to read content from STDIN.

Exit status: 0 when nothing would change, 2 when at least one file would change.
""",
)
@click.argument("paths", nargs=-1, metavar="[PATHS]...")
@common_config_options
@newline_style_option
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    newline_style: str | None,
) -> None:
    """Run every PATH through the emission core and report changes.

    Raises:
        SrcEmitUsageError: If no PATH is given or ``-`` is repeated.
        SrcEmitError: Translated core failures (missing/unreadable/undecodable
            files, contract violations, invalid configuration).
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj.get("console") or ClickConsole(enable_color=False)
    verbosity_level: int = ctx.obj.get("verbosity_level", LOG_LEVELS["WARNING"])

    if not paths:
        raise SrcEmitUsageError("No input files given.")
    if paths.count(STDIN_SENTINEL) > 1:
        raise SrcEmitUsageError("'-' (STDIN) may be given at most once.")

    try:
        config: Config = _build_config(
            newline_style=newline_style,
            config_paths=config_paths,
            no_config=no_config,
            verbosity_level=verbosity_level,
        )
        identities: list[FileIdentity] = [FileIdentity.from_name(p) for p in paths]

        cache = InMemorySourceCache()
        if STDIN_SENTINEL in paths:
            cache.add(FileIdentity.stdin(), _read_stdin_text())

        emitter = ChangedFilesEmitter(
            console,
            newline_style=config.newline_style,
            verbosity_level=config.verbosity_level or 0,
            quiet=verbosity_level >= LOG_LEVELS["ERROR"],
        )
        out: TextIO = sys.stdout

        # Not write_all_files: that driver never consults a cache, and stdin lives in one.
        emitter.emit_header(out)
        results: list[EmitterResult] = []
        for identity in identities:
            # The formatter sees cached sources normalized, files as stored.
            source: str | None = cache.lookup(to_source_key(identity))
            if source is None:
                source = read_source_text(ensure_real_path(identity))
            formatted_text: str = apply_newline_style(
                config.newline_style, normalize_newlines(source), source
            )
            results.append(
                write_file(
                    identity,
                    formatted_text,
                    out,
                    emitter,
                    config.newline_style,
                    cache=cache,
                )
            )
        emitter.emit_footer(out)
    except (OSError, UnicodeDecodeError, ContractViolationError, ConfigError) as exc:
        raise error_from_exception(exc) from exc

    if any(r.has_diff for r in results):
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
