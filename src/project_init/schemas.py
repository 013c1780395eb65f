# schemas.py

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

StepStatus = Literal["created", "skipped", "ran", "planned"]


class StepOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    step: str
    status: StepStatus
    message: str
    target: str | None = None


class ProvisionReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project_dir: Path
    python_version: str
    dry_run: bool = False
    success: bool = False
    outcomes: list[StepOutcome] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)

    def by_status(self, status: StepStatus) -> list[StepOutcome]:
        return [item for item in self.outcomes if item.status == status]
