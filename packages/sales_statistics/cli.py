"""CLI for the ``sales_statistics`` package.

Exposes a callable command handler (:func:`cmd_report`) and a Typer-based
console interface. Environment variables are loaded from a local ``.env``
using ``python-dotenv`` before delegating to command logic; business logic
lives in :mod:`sales_statistics.api`.

Exit codes for ``report``:

- ``0``: report printed and written.
- ``1``: invalid configuration or unreadable input (nothing aggregated).
- ``2``: report printed, but the report file could not be written.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .logging_setup import configure_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SINK_FAILED = 2


def cmd_report(
    *,
    input_path: Path | None = None,
    output_path: Path | None = None,
    delimiter: str | None = None,
    console: Console | None = None,
) -> int:
    """Produce the monthly statistics report and return a process exit code.

    Unset arguments fall back to ``SALES_STATISTICS_*`` environment variables
    and then to the built-in defaults (see :mod:`sales_statistics.settings`).
    Errors are written to stderr.
    """

    # Deferred imports to keep CLI startup fast
    from .api import generate_report
    from .errors import ConfigurationError, InputUnavailableError
    from .settings import load_settings

    try:
        settings = load_settings(
            input_path=input_path, output_path=output_path, delimiter=delimiter
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        result = generate_report(
            settings.input_path,
            settings.output_path,
            delimiter=settings.delimiter,
            console=console,
        )
    except InputUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(
        f"Processed {result.accepted + result.rejected} lines: "
        f"{result.accepted} accepted, {result.rejected} rejected",
        file=sys.stderr,
    )
    if not result.written:
        print(
            f"Error: failed to write report to {settings.output_path}",
            file=sys.stderr,
        )
        return EXIT_SINK_FAILED
    return EXIT_OK


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Summarize a sales transaction log into per-month statistics. "
        "Loads SALES_STATISTICS_* settings from a local .env before running."
    ),
)


@app.command("report")
def report_cmd(
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        help="Sales log to read (falls back to SALES_STATISTICS_INPUT).",
        dir_okay=False,
    ),
    output_path: Path | None = typer.Option(
        None,
        "--output-path",
        help="Report file to write (falls back to SALES_STATISTICS_OUTPUT).",
        dir_okay=False,
    ),
    delimiter: str | None = typer.Option(
        None,
        "--delimiter",
        help="Field delimiter (falls back to SALES_STATISTICS_DELIMITER, then ',').",
    ),
) -> None:
    """Aggregate the sales log and print/write the monthly report."""

    code = cmd_report(input_path=input_path, output_path=output_path, delimiter=delimiter)
    if code != EXIT_OK:
        raise typer.Exit(code)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Log level (falls back to SALES_STATISTICS_LOG_LEVEL, then INFO).",
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures logging once.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging(log_level)

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    app()
