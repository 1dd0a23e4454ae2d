"""Shared pytest fixtures for the tsinit test suite.

Provides reusable fixtures for:
- A recording Rich console patched into every module that prints
- Prompters fed from a list of scripted answers
- Config / ProjectAnswers with sensible test defaults
- Mocked git client and dependency installer
- A real local template repository for integration tests
"""

from __future__ import annotations

import io
import json
import subprocess
from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from tsinit.config import Config
from tsinit.models import MainBranch, ProjectAnswers, RepoURLKind
from tsinit.project import DependencyInstaller, GitClient
from tsinit.prompts import Prompter


# ---------------------------------------------------------------------------
# Console & prompts
# ---------------------------------------------------------------------------

def _recording_console() -> Console:
    return Console(file=io.StringIO(), width=300, color_system=None, force_terminal=False)


@pytest.fixture
def output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Route all console output into a buffer and return it.

    ``output.getvalue()`` holds everything printed so far, markup removed.
    """
    console = _recording_console()
    monkeypatch.setattr("tsinit.utils.console", console)
    monkeypatch.setattr("tsinit.cli.console", console)
    return console.file


@pytest.fixture
def make_prompter(output: io.StringIO) -> Callable[[list[str]], Prompter]:
    """Factory for a Prompter that reads *answers* one line at a time."""
    import tsinit.utils

    def factory(answers: list[str]) -> Prompter:
        stream = io.StringIO("".join(f"{a}\n" for a in answers))
        return Prompter(console=tsinit.utils.console, stream=stream)

    return factory


# ---------------------------------------------------------------------------
# Config and answers
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config rooted at a fresh temp directory."""
    base = tmp_path / "workspace"
    base.mkdir()
    return Config(base_dir=base)


@pytest.fixture
def answers() -> ProjectAnswers:
    """Answers of the documented end-to-end scenario."""
    return ProjectAnswers(
        project_name="demo",
        repo_url_kind=RepoURLKind.HTTPS,
        template_url="https://github.com/acme/ts-template",
        package_name="demo",
        license="ISC",
        keywords=["a", "b"],
        main_branch=MainBranch.MAIN,
    )


# ---------------------------------------------------------------------------
# Mock collaborators
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST = {
    "name": "ts-template",
    "version": "0.3.1",
    "description": "TypeScript starter",
    "main": "dist/index.js",
    "scripts": {"build": "tsc", "test": "jest"},
    "repository": {"type": "git", "url": "git+https://github.com/acme/ts-template.git"},
    "keywords": ["template"],
    "author": "Acme",
    "license": "MIT",
    "bugs": {"url": "https://github.com/acme/ts-template/issues"},
    "homepage": "https://github.com/acme/ts-template#readme",
    "devDependencies": {"typescript": "^5.4.0"},
}


@pytest.fixture
def template_manifest() -> dict:
    return json.loads(json.dumps(TEMPLATE_MANIFEST))


@pytest.fixture
def mock_git(template_manifest: dict) -> MagicMock:
    """GitClient double whose clone writes a template checkout to disk.

    Set ``mock_git.manifest = None`` to simulate a template without
    ``package.json``.
    """
    git = MagicMock(spec=GitClient)
    git.manifest = template_manifest

    async def _clone(url, directory, branch=None, cwd=None):
        target = Path(cwd) / directory
        target.mkdir(parents=True)
        (target / ".git").mkdir()
        if git.manifest is not None:
            (target / "package.json").write_text(
                json.dumps(git.manifest, indent=2) + "\n", encoding="utf-8"
            )

    git.clone = AsyncMock(side_effect=_clone)
    git.set_remote_url = AsyncMock()
    git.current_branch = AsyncMock(return_value="master")
    git.checkout = AsyncMock()
    git.merged_branches = AsyncMock(return_value=["main"])
    git.delete_branch = AsyncMock()
    git.commit_all = AsyncMock()
    return git


@pytest.fixture
def mock_installer() -> MagicMock:
    installer = MagicMock(spec=DependencyInstaller)
    installer.install = AsyncMock()
    return installer


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(stdout: str = "", stderr: str = "", returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Real git
# ---------------------------------------------------------------------------

def _git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def template_repo(tmp_path: Path, template_manifest: dict) -> Path:
    """Real git repository with a package.json on branch ``trunk``.

    A second branch ``feature/merged`` points at the same commit so branch
    cleanup has something to delete.
    """
    repo_dir = tmp_path / "template"
    repo_dir.mkdir()
    _git("init", cwd=repo_dir)
    _git("config", "user.email", "test@tsinit.local", cwd=repo_dir)
    _git("config", "user.name", "tsinit Test", cwd=repo_dir)
    _git("config", "commit.gpgsign", "false", cwd=repo_dir)
    (repo_dir / "package.json").write_text(
        json.dumps(template_manifest, indent=2) + "\n", encoding="utf-8"
    )
    (repo_dir / "README.md").write_text("# Template\n", encoding="utf-8")
    _git("add", ".", cwd=repo_dir)
    _git("commit", "-m", "Initial commit", cwd=repo_dir)
    _git("branch", "-M", "trunk", cwd=repo_dir)
    _git("branch", "feature/merged", cwd=repo_dir)
    yield repo_dir
