"""Typer application and CLI entry point for ucli.

ucli has no fixed command set: the operation verb, resource path, and
flags are all free-form. The Typer command therefore accepts every token
as an extra argument and hands the raw list to :func:`execute`, which
splits it with :mod:`ucli.parser`, loads the configuration, and dispatches
through :mod:`ucli.operations`.

Errors travel as :class:`~ucli.exceptions.UcliError` up to :func:`run`,
the single place where they become an exit code. :func:`main` is the
console-script entry point declared in ``pyproject.toml``; it adds a
SIGINT handler and a crash log for unexpected exceptions.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional, Sequence

import httpx
import typer

from ucli.exceptions import UcliError, UsageError
from ucli.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED

app = typer.Typer(
    name="ucli",
    help="Generic command-line HTTP client.",
    add_completion=False,
)


def execute(argv: Sequence[str], transport: Optional[httpx.BaseTransport] = None) -> None:
    """Run one ucli invocation.

    Args:
        argv: Command-line tokens without the program name.
        transport: Optional httpx transport override, used by tests.

    Raises:
        UcliError: For every failure; the caller decides how to exit.
    """
    from ucli.config import load_config
    from ucli.operations import handle_operation
    from ucli.output import OutputManager, debug, set_output
    from ucli.parser import parse_dynamic_flags, split_command, split_global_options
    from ucli.parser.flags import flags_to_plain

    options = split_global_options(argv)
    set_output(OutputManager(verbose=options.debug))

    config, config_path = load_config(options.config_path)
    debug(f"Configuration loaded from file: {config_path}")

    invocation = split_command(options.args)
    flags = parse_dynamic_flags(invocation.flag_tokens)

    debug(f"Operation: {invocation.operation}")
    debug(f"Resources: {invocation.resources}")
    debug(f"Flags: {flags_to_plain(flags)}")

    handle_operation(
        invocation.operation, invocation.resources, flags, config, transport=transport,
    )


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def run(ctx: typer.Context) -> None:
    """ucli [--config PATH] [--ucli-debug] OPERATION [RESOURCE]... [--FLAG [VALUE]]...

    Usage problems are printed to stdout like any other message for the
    user; every other failure goes to stderr as an error.
    """
    from ucli.output import error, print_data

    try:
        execute(list(ctx.args))
    except UsageError as exc:
        print_data(str(exc))
        raise typer.Exit(code=exc.exit_code)
    except UcliError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback to a crash log and return its path."""
    from ucli.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(f"{type(exc).__name__}: {exc}\n\n{traceback.format_exc()}")
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``ucli`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from ucli.output import error

        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
