"""Sequential, fail-fast project provisioning.

The bootstrapper checks the required tool first and every bundled template
second, so a run that aborts on a precondition leaves the project untouched.
After that each step either completes, skips, or raises a fatal error that
stops the run. Nothing is rolled back: every step is safe to repeat.
"""

from __future__ import annotations

from pathlib import Path

from project_init.config import InitSettings, load_settings
from project_init.core.command_runner import CommandRunner, SubprocessRunner
from project_init.core.console import Console
from project_init.core.context import ProvisionContext
from project_init.errors import FatalProvisionError, TemplateNotFoundError
from project_init.logger import get_logger
from project_init.schemas import ProvisionReport, StepOutcome
from project_init.steps import (
    CopyTemplateStep,
    CreateVenvStep,
    EnsureDirectoryStep,
    InstallHooksStep,
    RequireToolStep,
    Step,
    SyncDependenciesStep,
)

MANIFEST_NAME = "pyproject.toml"
MANIFEST_TEMPLATE = "pyproject.toml.template"


def default_steps() -> list[Step]:
    return [
        CreateVenvStep(),
        EnsureDirectoryStep(".vscode"),
        CopyTemplateStep("vscode_settings.json.template", ".vscode/settings.json"),
        CopyTemplateStep("pre-commit-config.yaml.template", ".pre-commit-config.yaml"),
        SyncDependenciesStep(),
        InstallHooksStep(),
    ]


class Bootstrapper:
    def __init__(
        self,
        project_dir: str | Path | None = None,
        settings: InitSettings | None = None,
        runner: CommandRunner | None = None,
        console: Console | None = None,
        steps: list[Step] | None = None,
        dry_run: bool = False,
    ) -> None:
        root = Path(project_dir) if project_dir is not None else Path.cwd()
        self.project_dir = root.resolve()
        self.settings = settings or load_settings(self.project_dir)
        self.runner = runner or SubprocessRunner()
        self.console = console or Console()
        self.steps = steps if steps is not None else default_steps()
        self.dry_run = dry_run
        self.logger = get_logger("bootstrapper")
        self.report: ProvisionReport | None = None

    def _context(self) -> ProvisionContext:
        return ProvisionContext(
            project_dir=self.project_dir,
            settings=self.settings,
            runner=self.runner,
            console=self.console,
            dry_run=self.dry_run,
        )

    def _validate_templates(self) -> None:
        for step in self.steps:
            for template in step.templates():
                source = self.settings.assets_dir / template
                if not source.is_file():
                    raise TemplateNotFoundError(str(source))

    def next_steps(self) -> list[str]:
        return [
            f"Activate virtual environment: source {self.settings.venv_dir}/bin/activate",
            "Install VSCode Ruff extension: charliermarsh.ruff",
            "Start coding!",
        ]

    def run(self) -> ProvisionReport:
        """Provision the project directory and return what each step did.

        Raises FatalProvisionError subclasses; the CLI turns them into exit 1.
        On failure `self.report` still holds the outcomes recorded so far.
        """
        context = self._context()
        try:
            report = self._provision(context)
        except FatalProvisionError:
            self.report = self._build_report(context, success=False)
            raise
        self.report = report
        self._print_summary(report)
        return report

    def _build_report(self, context: ProvisionContext, success: bool) -> ProvisionReport:
        return ProvisionReport(
            project_dir=self.project_dir,
            python_version=self.settings.python_version,
            dry_run=self.dry_run,
            success=success,
            outcomes=list(context.outcomes),
            next_steps=self.next_steps() if success else [],
        )

    def _provision(self, context: ProvisionContext) -> ProvisionReport:
        if not self.project_dir.is_dir():
            raise FatalProvisionError(f"Project directory does not exist: {self.project_dir}")
        self.logger.debug(
            "provisioning %s (python=%s dry_run=%s)",
            self.project_dir,
            self.settings.python_version,
            self.dry_run,
        )

        context.record(RequireToolStep().execute(context))
        self._validate_templates()
        self.console.info("Starting Python project initialization...")

        manifest_present = (self.project_dir / MANIFEST_NAME).is_file()
        manifest_notice_shown = False
        for step in self.steps:
            if step.requires_manifest and not manifest_present:
                if not manifest_notice_shown:
                    self.console.info(
                        f"{MANIFEST_NAME} not found. Skipping dependency installation."
                    )
                    self.console.info(
                        f"Create {MANIFEST_NAME} manually or use the template in "
                        f"{self.settings.assets_dir / MANIFEST_TEMPLATE}"
                    )
                    manifest_notice_shown = True
                context.record(
                    StepOutcome(
                        step=step.name,
                        status="skipped",
                        message=f"{MANIFEST_NAME} not found",
                    )
                )
                continue
            outcome = context.record(step.execute(context))
            self.logger.info("%s -> %s: %s", outcome.step, outcome.status, outcome.message)

        return self._build_report(context, success=True)

    def _print_summary(self, report: ProvisionReport) -> None:
        if report.dry_run:
            self.console.success("Dry run complete. No changes were made.")
            return
        self.console.success("Python project initialization complete!")
        self.console.line()
        self.console.info("Next steps:")
        for index, hint in enumerate(report.next_steps, start=1):
            self.console.line(f"  {index}. {hint}")
