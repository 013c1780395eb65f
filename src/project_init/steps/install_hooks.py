from project_init.core.context import ProvisionContext
from project_init.schemas import StepOutcome
from project_init.steps.base import Step


class InstallHooksStep(Step):
    name = "install_hooks"
    description = "Installs the pre-commit git hooks through the project environment."
    requires_manifest = True

    def execute(self, context: ProvisionContext) -> StepOutcome:
        command = [context.settings.tool, "run", "pre-commit", "install"]
        if context.dry_run:
            message = f"Would run: {' '.join(command)}"
            context.console.info(message)
            return StepOutcome(step=self.name, status="planned", message=message)

        context.console.info("Installing pre-commit hooks...")
        context.run_command(command)
        message = "Pre-commit hooks installed"
        context.console.success(message)
        return StepOutcome(step=self.name, status="ran", message=message)
