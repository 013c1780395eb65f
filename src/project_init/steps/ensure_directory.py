from project_init.core.context import ProvisionContext
from project_init.errors import FatalProvisionError
from project_init.logger import get_logger
from project_init.schemas import StepOutcome
from project_init.steps.base import Step


class EnsureDirectoryStep(Step):
    name = "ensure_directory"
    description = "Creates a directory in the project if it is missing."

    def __init__(self, relative: str) -> None:
        self.relative = relative
        self.logger = get_logger("steps.ensure_directory")

    def execute(self, context: ProvisionContext) -> StepOutcome:
        target = context.path(self.relative)
        if target.is_dir():
            self.logger.info("%s/ already present", self.relative)
            return StepOutcome(
                step=self.name,
                status="skipped",
                message=f"{self.relative}/ already exists",
                target=self.relative,
            )
        if target.exists() or target.is_symlink():
            raise FatalProvisionError(f"{self.relative} exists and is not a directory.")

        if context.dry_run:
            message = f"Would create {self.relative}/ directory"
            context.console.info(message)
            return StepOutcome(
                step=self.name, status="planned", message=message, target=self.relative
            )

        target.mkdir(parents=True)
        message = f"Created {self.relative}/ directory"
        context.console.success(message)
        return StepOutcome(step=self.name, status="created", message=message, target=self.relative)
