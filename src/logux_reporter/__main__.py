"""Console entry point rendering sample reporter entries.

Purpose
-------
Let operators preview how each event kind looks in their terminal and give
packaging smoke tests something to execute via ``python -m logux_reporter``
or the ``logux-reporter`` console script.

Contents
--------
* :func:`cli` - Click command rendering demo entries.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import click

from . import __init__conf__
from .adapters import RichConsoleAdapter
from .adapters.theme import COLOR_MODES
from .config import DOTENV_ENV_VAR, enable_dotenv, load_settings, should_use_dotenv
from .domain import EVENT_KINDS
from .reporter import reportdemo

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("kinds", nargs=-1, type=click.Choice(list(EVENT_KINDS)))
@click.option("--env", default="development", show_default=True, help="Server environment; only development is colourised.")
@click.option("--root", default=None, help="Project root used to classify stack frames.")
@click.option(
    "--color",
    type=click.Choice(list(COLOR_MODES)),
    default=None,
    help="Override colour selection (defaults to LOGUX_REPORTER_COLOR or auto).",
)
@click.option(
    "--dotenv/--no-dotenv",
    default=False,
    help="Load settings from the nearest .env file first (defaults to LOGUX_REPORTER_DOTENV).",
)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    kinds: tuple[str, ...],
    env: str,
    root: str | None,
    color: str | None,
    dotenv: bool,
    version: bool,
) -> None:
    """Render sample entries for KINDS (all event kinds when omitted)."""

    if version:
        click.echo(__init__conf__.version)
        return

    explicit: bool | None = None
    if ctx.get_parameter_source("dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = dotenv
    if should_use_dotenv(explicit=explicit, env_value=os.getenv(DOTENV_ENV_VAR)):
        loaded = enable_dotenv()
        logger.debug("dotenv file: %s", loaded)

    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    console = RichConsoleAdapter()
    reportdemo(
        kinds=kinds or None,
        env=env,
        root=root or settings.root,
        color=color or settings.color,
        console=console,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command and return an exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
