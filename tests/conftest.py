"""Shared test fixtures for the project-init test suite."""

from __future__ import annotations

import io
from collections.abc import Sequence
from pathlib import Path

import pytest

from project_init.core.command_runner import CommandResult
from project_init.core.console import Console


class FakeRunner:
    """Command runner that records calls instead of spawning processes.

    `uv venv <dir>` is simulated by writing `<dir>/pyvenv.cfg`, so repeated runs
    see the same filesystem a real tool would leave behind.
    """

    def __init__(self, available: Sequence[str] = ("uv",), fail_on: Sequence[str] = ()) -> None:
        self.available = set(available)
        self.fail_on = set(fail_on)
        self.calls: list[tuple[str, ...]] = []

    def which(self, name: str) -> str | None:
        if name in self.available:
            return f"/usr/local/bin/{name}"
        return None

    def run(self, command: Sequence[str], cwd: Path) -> CommandResult:
        argv = tuple(command)
        self.calls.append(argv)
        subcommand = argv[1] if len(argv) > 1 else ""
        if subcommand in self.fail_on:
            return CommandResult(command=argv, returncode=2)
        if subcommand == "venv":
            venv = Path(cwd) / argv[2]
            venv.mkdir(parents=True, exist_ok=True)
            (venv / "pyvenv.cfg").write_text("home = /usr/bin\n")
        return CommandResult(command=argv, returncode=0)

    def subcommands(self) -> list[str]:
        return [call[1] for call in self.calls]


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path under root to its bytes (None for directories)."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        key = path.relative_to(root).as_posix()
        result[key] = None if path.is_dir() else path.read_bytes()
    return result


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "PROJECT_INIT_PYTHON",
        "PROJECT_INIT_TOOL",
        "PROJECT_INIT_SYNC_EXTRA",
        "PROJECT_INIT_VENV_DIR",
        "PROJECT_INIT_ASSETS_DIR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def console() -> Console:
    return Console(stream=io.StringIO(), color=False)


@pytest.fixture
def make_runner():  # noqa: ANN201
    return FakeRunner


@pytest.fixture
def take_snapshot():  # noqa: ANN201
    return snapshot
