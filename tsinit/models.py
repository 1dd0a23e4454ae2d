"""Pydantic v2 models shared by the questionnaire and the initializer.

``ProjectAnswers`` is the transient record the prompts fill in; it is never
persisted, only handed to ``ProjectInitializer.run``.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RepoURLKind(str, Enum):
    """Which URL syntax the user will type for repository addresses."""
    HTTPS = "https"
    SSH = "ssh"


class MainBranch(str, Enum):
    """Allowed names for the project's primary branch."""
    MASTER = "master"
    MAIN = "main"


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

class ProjectAnswers(BaseModel):
    """Everything the user told us about the project to create."""

    project_name: str = Field(..., description="Directory name of the new project")
    repo_url_kind: RepoURLKind = Field(default=RepoURLKind.HTTPS)
    template_url: str = Field(..., description="Template repository to clone")
    branch_name: Optional[str] = Field(
        default=None, description="Template branch to clone (None = default branch)"
    )
    new_repo_url: Optional[str] = Field(
        default=None, description="Remote to point origin at after cloning"
    )
    package_name: str = Field(default="")
    description: str = Field(default="")
    author: str = Field(default="")
    license: str = Field(default="ISC")
    keywords: list[str] = Field(default_factory=list)
    main_branch: MainBranch = Field(default=MainBranch.MAIN)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not PROJECT_NAME_PATTERN.fullmatch(value):
            raise ValueError(
                "project name may only contain letters, digits, underscores and dashes"
            )
        return value

    @field_validator("branch_name", "new_repo_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def effective_package_name(self) -> str:
        """Package name written to the manifest."""
        return self.package_name or self.project_name

    @property
    def repository_url(self) -> str:
        """URL recorded as ``repository.url``: the new remote if given, else the template."""
        return self.new_repo_url or self.template_url

    @property
    def web_url(self) -> str:
        """Repository URL without a trailing ``.git`` suffix."""
        url = self.repository_url
        if url.endswith(".git"):
            url = url[: -len(".git")]
        return url

    @property
    def bugs_url(self) -> str:
        return f"{self.web_url}/issues"

    @property
    def homepage(self) -> str:
        return f"{self.web_url}#readme"
