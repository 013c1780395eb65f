"""Settings for a provisioning run.

Resolution order for every field:
1) explicit keyword passed to `load_settings`
2) `PROJECT_INIT_*` environment variable (a project-local `.env` is loaded first)
3) built-in default
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

BUNDLED_ASSETS_DIR = Path(__file__).resolve().parent / "assets"

DEFAULT_PYTHON_VERSION = "3.12"
DEFAULT_TOOL = "uv"
DEFAULT_SYNC_EXTRA = "dev"
DEFAULT_VENV_DIR = ".venv"

TOOL_INSTALL_URLS = {
    "uv": "https://github.com/astral-sh/uv",
}

_ENV_KEYS = {
    "python_version": "PROJECT_INIT_PYTHON",
    "tool": "PROJECT_INIT_TOOL",
    "sync_extra": "PROJECT_INIT_SYNC_EXTRA",
    "venv_dir": "PROJECT_INIT_VENV_DIR",
    "assets_dir": "PROJECT_INIT_ASSETS_DIR",
}


class InitSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    python_version: str = DEFAULT_PYTHON_VERSION
    tool: str = DEFAULT_TOOL
    sync_extra: str = DEFAULT_SYNC_EXTRA
    venv_dir: str = DEFAULT_VENV_DIR
    assets_dir: Path = BUNDLED_ASSETS_DIR

    @field_validator("python_version", "tool", "venv_dir")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("sync_extra")
    @classmethod
    def _strip_extra(cls, value: str) -> str:
        return value.strip()

    @property
    def install_url(self) -> str | None:
        return TOOL_INSTALL_URLS.get(self.tool)


def load_settings(project_dir: str | Path | None = None, **overrides: object) -> InitSettings:
    """Build settings for a run rooted at `project_dir`.

    `None` overrides are ignored so CLI flags that were not given fall through
    to the environment.
    """
    unknown = set(overrides) - set(_ENV_KEYS)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    root = Path(project_dir) if project_dir is not None else Path.cwd()
    env_file = root / ".env"
    if env_file.is_file():
        load_dotenv(dotenv_path=env_file, override=False)

    values: dict[str, object] = {}
    for field_name, env_key in _ENV_KEYS.items():
        explicit = overrides.get(field_name)
        if explicit is not None:
            values[field_name] = explicit
            continue
        from_env = os.getenv(env_key)
        if from_env is not None and from_env.strip():
            values[field_name] = from_env
    return InitSettings(**values)
