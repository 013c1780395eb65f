from project_init.core.context import ProvisionContext
from project_init.errors import MissingToolError
from project_init.schemas import StepOutcome
from project_init.steps.base import Step


class RequireToolStep(Step):
    name = "require_tool"
    description = "Fails the run when the external tool is not on PATH."

    def execute(self, context: ProvisionContext) -> StepOutcome:
        tool = context.settings.tool
        location = context.runner.which(tool)
        if location is None:
            raise MissingToolError(tool, context.settings.install_url)
        return StepOutcome(step=self.name, status="ran", message=f"Found {tool} at {location}")
