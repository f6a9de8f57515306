"""Output system with strict stdout/stderr discipline.

* **stdout** -- primary data only: response bodies, status messages, and
  the usage messages a user needs to read.
* **stderr** -- diagnostics: warnings, fatal errors, and the
  ``--ucli-debug`` trace.
* **Colour control** -- Rich styling on stderr, disabled by ``NO_COLOR``
  or ``TERM=dumb``.

The module exposes two layers:

1. :class:`OutputManager` -- a stateful object holding the debug and colour
   preferences. Created once per invocation in :mod:`ucli.app` and
   installed via :func:`set_output`.
2. Module-level convenience functions (:func:`print_data`, :func:`debug`,
   etc.) that delegate to the global ``OutputManager`` instance so callers
   do not need to pass the manager around.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text


class OutputManager:
    """Central manager for all CLI output.

    Args:
        verbose: Emit debug diagnostics (``--ucli-debug``) on stderr.
        no_color: Disable Rich styling even on a terminal.
    """

    def __init__(self, verbose: bool = False, no_color: bool = False) -> None:
        self._verbose = verbose
        self._no_color = no_color or _should_disable_color()
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def is_verbose(self) -> bool:
        """Whether debug diagnostics are enabled."""
        return self._verbose

    # ------------------------------------------------------------------ #
    # Data output (stdout)
    # ------------------------------------------------------------------ #

    def print_data(self, text: str) -> None:
        """Print *text* verbatim to stdout followed by a newline."""
        print(text, file=sys.stdout, flush=True)

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def warning(self, message: str) -> None:
        """Print a yellow warning to stderr."""
        if self._no_color:
            print(f"Warning: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(Text("Warning: ", style="yellow") + Text(message), soft_wrap=True)

    def error(self, message: str) -> None:
        """Print a bold-red error to stderr. Never suppressed."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(Text("Error: ", style="bold red") + Text(message), soft_wrap=True)

    def debug(self, message: str) -> None:
        """Print a ``[debug]``-prefixed message to stderr when debugging is on.

        Messages routinely contain headers and bodies with square brackets,
        so they are never interpreted as Rich markup.
        """
        if not self._verbose:
            return
        if self._no_color:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(Text(f"[debug] {message}", style="dim"), soft_wrap=True)


def _should_disable_color() -> bool:
    """Return True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    return os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Global output instance (set during app startup)
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager` instance."""
    global _output
    _output = output


def reset_output() -> None:
    """Drop the global :class:`OutputManager`; primarily for test isolation."""
    global _output
    _output = None


# ------------------------------------------------------------------ #
# Convenience functions that use the global instance
# ------------------------------------------------------------------ #


def print_data(text: str) -> None:
    """Print raw data to stdout via the global OutputManager."""
    get_output().print_data(text)


def warning(message: str) -> None:
    """Print warning to stderr via the global OutputManager."""
    get_output().warning(message)


def error(message: str) -> None:
    """Print error to stderr via the global OutputManager."""
    get_output().error(message)


def debug(message: str) -> None:
    """Print debug message to stderr via the global OutputManager."""
    get_output().debug(message)
