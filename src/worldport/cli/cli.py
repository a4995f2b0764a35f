#!/usr/bin/env python3
"""
worldport.cli

Typer entry point converting a legacy ``level.dat`` for the browser client.

The command takes no arguments: everything is read from ``config.toml`` in
the working directory, which is created with defaults on first run.

Examples
--------
Run the conversion:

    worldport

Show progress logging:

    WORLDPORT_LOG_LEVEL=INFO worldport
"""

from __future__ import annotations

import logging
import os
import traceback

import typer

from worldport.application.results import PipelineResult
from worldport.errors import WorldportError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "WORLDPORT_LOG_LEVEL"
ACKNOWLEDGE_PROMPT = "Press Enter to Exit"

app = typer.Typer(
    name="worldport",
    help="Convert a legacy level.dat into browser storage or an injection script.",
    add_completion=False,
)


def _configure_logging() -> int:
    """Configure root logging from the environment and return the level."""
    raw = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return level


def _print_error(exc: BaseException, debug: bool) -> int:
    """Print a one-line diagnostic for ``exc`` and return its exit code.

    Parameters
    ----------
    exc : BaseException
        Error that stopped the pipeline.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    kind = getattr(exc, "kind", type(exc).__name__)
    typer.secho(f"Error: {kind}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _wait_for_acknowledgment() -> None:
    """Block until the user presses Enter (or input is closed)."""
    try:
        typer.prompt(
            ACKNOWLEDGE_PROMPT, default="", show_default=False, prompt_suffix="\n"
        )
    except typer.Abort:
        pass


def report(outcome: PipelineResult | BaseException, debug: bool = False) -> int:
    """Present the pipeline outcome and return the process exit code."""
    if isinstance(outcome, PipelineResult):
        typer.secho(f"✓ Saved: {outcome.output_path}", fg=typer.colors.GREEN)
        code = 0
    else:
        code = _print_error(outcome, debug)
    _wait_for_acknowledgment()
    return code


@app.command()
def convert_cmd() -> None:
    """Convert the configured legacy level.dat for the browser client."""
    debug = _configure_logging() <= logging.DEBUG

    from worldport.application.use_cases import run_pipeline

    outcome: PipelineResult | BaseException
    try:
        outcome = run_pipeline(progress=typer.echo)
    except WorldportError as exc:
        outcome = exc
    except Exception as exc:
        logger.exception("unexpected error during conversion")
        outcome = exc
    raise typer.Exit(code=report(outcome, debug))


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
