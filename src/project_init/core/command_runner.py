# command_runner.py

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from project_init.logger import get_logger


@dataclass(frozen=True)
class CommandResult:
    command: tuple[str, ...]
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def which(self, name: str) -> str | None: ...

    def run(self, command: Sequence[str], cwd: Path) -> CommandResult: ...


class SubprocessRunner:
    """Runs external tools in the foreground.

    Output is not captured so the tool's own progress reaches the terminal.
    """

    def __init__(self) -> None:
        self.logger = get_logger("command_runner")

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def run(self, command: Sequence[str], cwd: Path) -> CommandResult:
        argv = tuple(command)
        self.logger.debug("running %s in %s", " ".join(argv), cwd)
        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except FileNotFoundError:
            # The executable vanished between the PATH check and the call.
            self.logger.debug("executable not found: %s", argv[0])
            return CommandResult(command=argv, returncode=127)
        self.logger.debug("exit code %s for %s", completed.returncode, argv[0])
        return CommandResult(command=argv, returncode=completed.returncode)
