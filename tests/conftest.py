"""Shared test fixtures for ucli.

Provides reusable fixtures for isolated working directories, configuration
files, output state, HTTP mock transports, and the CLI runner. These
fixtures are automatically discovered by pytest.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import yaml

from ucli.models import Configuration
from ucli.output import OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager's Rich console keeps a reference to the sys.stderr
    that was active when it was created. When CliRunner or capsys swaps the
    streams, that reference goes stale, so every test starts fresh.
    """
    yield
    reset_output()


@pytest.fixture
def debug_output() -> OutputManager:
    """Install an OutputManager with debug diagnostics enabled and no colour."""
    output = OutputManager(verbose=True, no_color=True)
    set_output(output)
    return output


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary working directory.

    Also points XDG_DATA_HOME into tmp_path so crash logs never touch the
    real user directories.
    """
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(isolated_cwd: Path) -> Callable[..., Path]:
    """Return a helper writing ``configuration.yaml`` (or *name*) into the cwd."""

    def _write(data: dict[str, Any], name: str = "configuration.yaml") -> Path:
        path = isolated_cwd / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config() -> Configuration:
    """A minimal configuration without auth or custom headers."""
    return Configuration(url="https://api.example.com")


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served.

    Args:
        status_code: Status of the canned response.
        content: Body of the canned response.
        headers: Headers of the canned response.
    """

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return httpx.Response(status_code, content=content, headers=headers)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory for :class:`RecordingTransport` instances."""
    return RecordingTransport


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
