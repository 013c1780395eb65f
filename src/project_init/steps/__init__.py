"""Provisioning steps, run in order by the bootstrapper."""

from project_init.steps.base import Step
from project_init.steps.copy_template import CopyTemplateStep
from project_init.steps.create_venv import CreateVenvStep
from project_init.steps.ensure_directory import EnsureDirectoryStep
from project_init.steps.install_hooks import InstallHooksStep
from project_init.steps.require_tool import RequireToolStep
from project_init.steps.sync_dependencies import SyncDependenciesStep

__all__ = [
    "Step",
    "CopyTemplateStep",
    "CreateVenvStep",
    "EnsureDirectoryStep",
    "InstallHooksStep",
    "RequireToolStep",
    "SyncDependenciesStep",
]
