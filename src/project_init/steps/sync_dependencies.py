from project_init.core.context import ProvisionContext
from project_init.schemas import StepOutcome
from project_init.steps.base import Step


class SyncDependenciesStep(Step):
    name = "sync_dependencies"
    description = "Installs the project's dependencies from pyproject.toml."
    requires_manifest = True

    def command(self, context: ProvisionContext) -> list[str]:
        settings = context.settings
        command = [settings.tool, "sync"]
        if settings.sync_extra:
            command += ["--extra", settings.sync_extra]
        return command

    def execute(self, context: ProvisionContext) -> StepOutcome:
        command = self.command(context)
        if context.dry_run:
            message = f"Would run: {' '.join(command)}"
            context.console.info(message)
            return StepOutcome(step=self.name, status="planned", message=message)

        context.console.info("Installing dependencies...")
        context.run_command(command)
        message = "Dependencies installed"
        context.console.success(message)
        return StepOutcome(step=self.name, status="ran", message=message)
