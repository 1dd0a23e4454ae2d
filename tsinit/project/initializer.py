"""Project materialization: turns ``ProjectAnswers`` into a working project.

Steps, strictly in order, stopping at the first failure:

1. clone the template into ``<base_dir>/<project_name>``
2. look for the manifest; if missing, report it and stop
3. rewrite the manifest metadata
4. install dependencies
5. repoint ``origin`` when a new repository URL was given
6. check out the main branch and delete every other merged branch
7. commit the result (only with ``Config.commit_changes``)
8. report success

Nothing is rolled back: a failure leaves whatever was already created.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tsinit.config import Config
from tsinit.errors import InitError
from tsinit.i18n import MessageId, Messages
from tsinit.models import ProjectAnswers
from tsinit.project.git import GitClient
from tsinit.project.installer import DependencyInstaller
from tsinit.project.manifest import Manifest
from tsinit.utils import print_error, print_step, print_success


@dataclass
class InitResult:
    """Outcome of a materialization run."""

    project_dir: Path
    manifest_path: Path
    completed: bool = False
    deleted_branches: list[str] = field(default_factory=list)


def commit_message(project_name: str) -> str:
    return f"chore: initialize {project_name} from template"


class ProjectInitializer:
    """Runs the materialization steps for one set of answers.

    Attributes:
        config: Tool configuration (paths, commands, defaults).
        messages: The run's localized messages.
        git: Git client; replaced by a mock in tests.
        installer: Dependency installer; replaced by a mock in tests.
    """

    def __init__(
        self,
        config: Config,
        messages: Messages,
        git: GitClient | None = None,
        installer: DependencyInstaller | None = None,
    ) -> None:
        self.config = config
        self.messages = messages
        self.git = git or GitClient(config.git_executable, timeout=config.command_timeout)
        self.installer = installer or DependencyInstaller(
            config.install_command, timeout=config.command_timeout
        )

    async def run(self, answers: ProjectAnswers) -> InitResult:
        """Materialize the project described by *answers*.

        Returns:
            ``InitResult`` with ``completed=False`` when the template has no
            manifest (the clone is left in place).

        Raises:
            InitError: The target directory already exists.
            GitError / InstallError / ManifestError: A step failed.
        """
        msg = self.messages
        base_dir = self.config.base_dir
        project_dir = self.config.project_path(answers.project_name)
        manifest_path = project_dir / self.config.manifest_filename
        result = InitResult(project_dir=project_dir, manifest_path=manifest_path)

        if not base_dir.is_dir():
            raise InitError(f"Base directory does not exist: {base_dir}")
        if project_dir.exists():
            raise InitError(f"Target directory already exists: {project_dir}")

        print_step(msg.format(MessageId.CREATING_PROJECT, f"/{answers.project_name}"))
        await self.git.clone(
            answers.template_url,
            answers.project_name,
            branch=answers.branch_name,
            cwd=base_dir,
        )

        if not manifest_path.is_file():
            print_error(msg.get(MessageId.ERROR_PACKAGE_JSON))
            return result

        manifest = Manifest.load(manifest_path)
        manifest.apply(answers, version=self.config.manifest_version)
        manifest.save()

        print_step(msg.get(MessageId.INSTALLING_DEPENDENCIES))
        await self.installer.install(project_dir)

        if answers.new_repo_url:
            print_step(msg.format(MessageId.SETTING_REMOTE, answers.new_repo_url))
            await self.git.set_remote_url(project_dir, answers.new_repo_url)

        print_step(msg.get(MessageId.CLEANING_UP_BRANCHES))
        result.deleted_branches = await self._cleanup_branches(
            project_dir, answers.main_branch.value
        )

        if self.config.commit_changes:
            print_step(msg.get(MessageId.COMMITTING_CHANGES))
            await self.git.commit_all(project_dir, commit_message(answers.project_name))

        print_success(msg.get(MessageId.PROJECT_READY))
        result.completed = True
        return result

    async def _cleanup_branches(self, project_dir: Path, main_branch: str) -> list[str]:
        """Move to *main_branch* and delete the cloned branch plus every merged branch.

        Returns the deleted branch names in deletion order.
        """
        source_branch = await self.git.current_branch(project_dir)
        await self.git.checkout(project_dir, main_branch)

        deleted: list[str] = []
        # "HEAD" means the clone is detached (e.g. a tag was cloned)
        if source_branch not in (main_branch, "HEAD"):
            await self.git.delete_branch(project_dir, source_branch)
            deleted.append(source_branch)

        for branch in await self.git.merged_branches(project_dir, main_branch):
            if branch == main_branch or branch in deleted or branch.startswith("("):
                continue
            await self.git.delete_branch(project_dir, branch)
            deleted.append(branch)

        return deleted
