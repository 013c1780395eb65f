from project_init.core.context import ProvisionContext
from project_init.errors import TemplateNotFoundError
from project_init.schemas import StepOutcome
from project_init.steps.base import Step


class CopyTemplateStep(Step):
    name = "copy_template"
    description = "Copies a bundled template into the project. Never overwrites."

    def __init__(self, template: str, relative: str) -> None:
        self.template = template
        self.relative = relative

    def templates(self) -> list[str]:
        return [self.template]

    def execute(self, context: ProvisionContext) -> StepOutcome:
        target = context.path(self.relative)
        if target.exists() or target.is_symlink():
            message = f"{self.relative} already exists, skipping..."
            context.console.info(message)
            return StepOutcome(
                step=self.name, status="skipped", message=message, target=self.relative
            )

        source = context.settings.assets_dir / self.template
        if not source.is_file():
            raise TemplateNotFoundError(str(source))

        if context.dry_run:
            message = f"Would create {self.relative}"
            context.console.info(message)
            return StepOutcome(
                step=self.name, status="planned", message=message, target=self.relative
            )

        target.parent.mkdir(parents=True, exist_ok=True)
        # "x" mode refuses to clobber a file that appeared after the check above.
        with open(target, "xb") as handle:
            handle.write(source.read_bytes())
        message = f"Created {self.relative}"
        context.console.success(message)
        return StepOutcome(step=self.name, status="created", message=message, target=self.relative)
