# context.py

from dataclasses import dataclass, field
from pathlib import Path

from project_init.config import InitSettings
from project_init.core.command_runner import CommandRunner
from project_init.core.console import Console
from project_init.errors import CommandFailedError
from project_init.schemas import StepOutcome


@dataclass
class ProvisionContext:
    project_dir: Path
    settings: InitSettings
    runner: CommandRunner
    console: Console
    dry_run: bool = False
    outcomes: list[StepOutcome] = field(default_factory=list)

    def path(self, relative: str) -> Path:
        return self.project_dir / relative

    def run_command(self, command: list[str]) -> None:
        result = self.runner.run(command, cwd=self.project_dir)
        if not result.ok:
            raise CommandFailedError(command, result.returncode, result.output)

    def record(self, outcome: StepOutcome) -> StepOutcome:
        self.outcomes.append(outcome)
        return outcome
