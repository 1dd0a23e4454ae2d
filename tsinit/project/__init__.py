"""tsinit project module.

Materializes a new project from the collected answers: clone, manifest
rewrite, dependency install, remote update and branch cleanup.

Key classes:
    ProjectInitializer   - Ordered materialization steps
    GitClient            - Async git wrapper (inherited terminal output)
    DependencyInstaller  - Runs the package manager's install command
    Manifest             - package.json load / rewrite / atomic save
"""

from .git import GitClient, GitError
from .initializer import InitResult, ProjectInitializer, commit_message
from .installer import DependencyInstaller, InstallError
from .manifest import Manifest, ManifestError

__all__ = [
    # Materialization
    "ProjectInitializer",
    "InitResult",
    "commit_message",
    # Git
    "GitClient",
    "GitError",
    # Dependencies
    "DependencyInstaller",
    "InstallError",
    # Manifest
    "Manifest",
    "ManifestError",
]
