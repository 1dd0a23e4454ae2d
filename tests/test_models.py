"""Unit tests for ProjectAnswers and enums (tsinit.models)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tsinit.models import MainBranch, ProjectAnswers, RepoURLKind


class TestProjectAnswers:
    @pytest.mark.unit
    def test_defaults(self):
        answers = ProjectAnswers(project_name="demo", template_url="https://github.com/a/b")
        assert answers.repo_url_kind is RepoURLKind.HTTPS
        assert answers.branch_name is None
        assert answers.new_repo_url is None
        assert answers.license == "ISC"
        assert answers.keywords == []
        assert answers.main_branch is MainBranch.MAIN

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["my app", "", "a/b"])
    def test_invalid_project_name(self, name: str):
        with pytest.raises(ValidationError):
            ProjectAnswers(project_name=name, template_url="https://github.com/a/b")

    @pytest.mark.unit
    def test_blank_optionals_become_none(self):
        answers = ProjectAnswers(
            project_name="demo",
            template_url="https://github.com/a/b",
            branch_name="  ",
            new_repo_url="",
        )
        assert answers.branch_name is None
        assert answers.new_repo_url is None

    @pytest.mark.unit
    def test_effective_package_name_falls_back(self):
        answers = ProjectAnswers(project_name="demo", template_url="https://github.com/a/b")
        assert answers.effective_package_name == "demo"
        answers = answers.model_copy(update={"package_name": "@scope/demo"})
        assert answers.effective_package_name == "@scope/demo"

    @pytest.mark.unit
    def test_derived_urls_from_template(self):
        answers = ProjectAnswers(project_name="demo", template_url="https://github.com/acme/t.git")
        assert answers.repository_url == "https://github.com/acme/t.git"
        assert answers.web_url == "https://github.com/acme/t"
        assert answers.bugs_url == "https://github.com/acme/t/issues"
        assert answers.homepage == "https://github.com/acme/t#readme"

    @pytest.mark.unit
    def test_derived_urls_prefer_new_remote(self):
        answers = ProjectAnswers(
            project_name="demo",
            template_url="https://github.com/acme/t",
            new_repo_url="git@github.com:me/demo.git",
        )
        assert answers.repository_url == "git@github.com:me/demo.git"
        assert answers.bugs_url == "git@github.com:me/demo/issues"
