from project_init.core.context import ProvisionContext
from project_init.schemas import StepOutcome


class Step:
    name: str
    description: str
    requires_manifest: bool = False

    def execute(self, context: ProvisionContext) -> StepOutcome:
        raise NotImplementedError("Step must implement the execute method.")

    def templates(self) -> list[str]:
        """Bundled template names this step may copy."""
        return []
