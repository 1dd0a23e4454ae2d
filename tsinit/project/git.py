"""Git operations used while materializing a project.

Side-effecting commands (clone, remote, checkout, branch deletion, commit)
inherit the terminal so the user sees git's own output live. Only the
queries whose output we parse are captured.
"""

from __future__ import annotations

from pathlib import Path

from tsinit.errors import TsInitError
from tsinit.utils import run_command


class GitError(TsInitError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, message: str, command: str = "", returncode: int = 0, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


async def _run_git(
    *args: str,
    executable: str = "git",
    cwd: str | Path | None = None,
    timeout: float | None = None,
    capture: bool = False,
) -> str:
    """Run a git command and return its stdout (empty unless *capture*).

    Raises GitError if the command exits with a non-zero code.
    """
    cmd = [executable, *args]
    cmd_str = " ".join(cmd)

    returncode, stdout, stderr = await run_command(
        cmd, cwd=cwd, timeout=timeout, capture=capture
    )
    if returncode != 0:
        detail = f"\n{stderr}" if stderr else ""
        raise GitError(
            f"Git command failed (exit {returncode}): {cmd_str}{detail}",
            command=cmd_str,
            returncode=returncode,
            stderr=stderr,
        )
    return stdout


class GitClient:
    """Thin async wrapper over the git executable.

    Args:
        executable: Name or path of the git binary.
        timeout: Per-command timeout in seconds, ``None`` to wait forever.
    """

    def __init__(
        self,
        executable: str = "git",
        timeout: float | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    async def _git(self, *args: str, cwd: str | Path | None = None, capture: bool = False) -> str:
        return await _run_git(
            *args,
            executable=self.executable,
            cwd=cwd,
            timeout=self.timeout,
            capture=capture,
        )

    async def clone(
        self,
        url: str,
        directory: str | Path,
        branch: str | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        """Clone *url* into *directory*, limited to *branch* when given."""
        args = ["clone"]
        if branch:
            args += ["--branch", branch, "--single-branch"]
        args += [url, str(directory)]
        await self._git(*args, cwd=cwd)

    async def set_remote_url(self, repo: Path, url: str, remote: str = "origin") -> None:
        await self._git("remote", "set-url", remote, url, cwd=repo)

    async def current_branch(self, repo: Path) -> str:
        """Short name of the checked-out branch."""
        out = await self._git("rev-parse", "--abbrev-ref", "HEAD", cwd=repo, capture=True)
        return out.strip()

    async def checkout(self, repo: Path, branch: str) -> None:
        """Check out *branch*, creating it (or resetting it) at the current HEAD."""
        await self._git("checkout", "-B", branch, cwd=repo)

    async def merged_branches(self, repo: Path, into: str) -> list[str]:
        """Local branches already merged into *into*, short names."""
        out = await self._git(
            "branch", "--merged", into, "--format=%(refname:short)",
            cwd=repo,
            capture=True,
        )
        return [line.strip() for line in out.splitlines() if line.strip()]

    async def delete_branch(self, repo: Path, name: str) -> None:
        """Force-delete the local branch *name*."""
        await self._git("branch", "-D", name, cwd=repo)

    async def commit_all(self, repo: Path, message: str) -> None:
        """Stage every change and commit it with *message*."""
        await self._git("add", "-A", cwd=repo)
        await self._git("commit", "-m", message, cwd=repo)
