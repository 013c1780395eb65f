from project_init.core.context import ProvisionContext
from project_init.errors import FatalProvisionError
from project_init.schemas import StepOutcome
from project_init.steps.base import Step


class CreateVenvStep(Step):
    name = "create_venv"
    description = "Creates the virtual environment unless one is already there."

    def execute(self, context: ProvisionContext) -> StepOutcome:
        settings = context.settings
        venv_dir = settings.venv_dir
        target = context.path(venv_dir)

        if (target / "pyvenv.cfg").is_file():
            message = f"{venv_dir}/ already exists, skipping..."
            context.console.info(message)
            return StepOutcome(step=self.name, status="skipped", message=message, target=venv_dir)

        # The tool replaces whatever sits at the venv path; only an empty directory is safe.
        if target.is_symlink() or (target.exists() and not target.is_dir()):
            raise FatalProvisionError(f"{venv_dir} exists and is not a virtual environment.")
        if target.is_dir() and any(target.iterdir()):
            raise FatalProvisionError(
                f"{venv_dir}/ is not empty and is not a virtual environment (no pyvenv.cfg)."
            )

        if context.dry_run:
            message = f"Would create virtual environment with Python {settings.python_version}"
            context.console.info(message)
            return StepOutcome(step=self.name, status="planned", message=message, target=venv_dir)

        context.console.info(
            f"Creating virtual environment with Python {settings.python_version}..."
        )
        context.run_command(
            [settings.tool, "venv", venv_dir, "--python", settings.python_version]
        )
        message = f"Virtual environment created at {venv_dir}/"
        context.console.success(message)
        return StepOutcome(step=self.name, status="ran", message=message, target=venv_dir)
