"""tsinit configuration.

Typed settings for the external tools the initializer drives and the defaults
it writes into the new manifest. All settings use Pydantic v2 models so they
are validated at construction time. Tool and manifest defaults can be
overridden from environment variables; the accepted repository host cannot.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from tsinit.models import MainBranch


class Config(BaseModel):
    """Global tsinit configuration.

    Created once by the CLI entry point and passed to the questionnaire and
    the initializer.
    """

    base_dir: Path = Field(
        default=Path("."), description="Directory in which the project folder is created"
    )
    template_host: str = Field(
        default="github.com", description="Only repository URLs on this host are accepted"
    )
    git_executable: str = Field(default="git")
    install_command: list[str] = Field(default_factory=lambda: ["npm", "install"])
    manifest_filename: str = Field(default="package.json")
    manifest_version: str = Field(default="1.0.0")
    default_license: str = Field(default="ISC")
    default_main_branch: MainBranch = Field(default=MainBranch.MAIN)
    commit_changes: bool = Field(
        default=False, description="Commit the rewritten manifest after branch cleanup"
    )
    command_timeout: float | None = Field(
        default=None, gt=0, description="Per-command timeout in seconds (None waits forever)"
    )

    @field_validator("install_command")
    @classmethod
    def _install_command_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("install_command must contain at least the executable")
        return value

    @field_validator("template_host")
    @classmethod
    def _normalise_host(cls, value: str) -> str:
        host = value.strip().lower()
        if not host:
            raise ValueError("template_host must not be empty")
        return host

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def project_path(self, project_name: str) -> Path:
        """Directory the template is cloned into."""
        return self.base_dir / project_name

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            TSINIT_BASE_DIR, TSINIT_GIT,
            TSINIT_INSTALL_COMMAND, TSINIT_DEFAULT_LICENSE,
            TSINIT_DEFAULT_MAIN_BRANCH, TSINIT_COMMIT, TSINIT_COMMAND_TIMEOUT.

        ``template_host`` is never read from the environment; pass it as a
        keyword argument.

        Keyword arguments take precedence over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TSINIT_BASE_DIR"):
            kwargs["base_dir"] = Path(os.environ["TSINIT_BASE_DIR"])
        if os.environ.get("TSINIT_GIT"):
            kwargs["git_executable"] = os.environ["TSINIT_GIT"]
        if os.environ.get("TSINIT_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["TSINIT_INSTALL_COMMAND"].split()
        if os.environ.get("TSINIT_DEFAULT_LICENSE"):
            kwargs["default_license"] = os.environ["TSINIT_DEFAULT_LICENSE"]
        if os.environ.get("TSINIT_DEFAULT_MAIN_BRANCH"):
            kwargs["default_main_branch"] = os.environ["TSINIT_DEFAULT_MAIN_BRANCH"]
        if os.environ.get("TSINIT_COMMIT"):
            kwargs["commit_changes"] = os.environ["TSINIT_COMMIT"].lower() in ("1", "true", "yes")
        if os.environ.get("TSINIT_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = float(os.environ["TSINIT_COMMAND_TIMEOUT"])

        kwargs.update(overrides)
        return cls(**kwargs)
