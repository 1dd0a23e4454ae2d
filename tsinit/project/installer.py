"""Dependency installation for the freshly cloned project."""

from __future__ import annotations

from pathlib import Path

from tsinit.errors import TsInitError
from tsinit.utils import run_command


class InstallError(TsInitError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, message: str, command: str = "", returncode: int = 0):
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class DependencyInstaller:
    """Runs the configured install command (``npm install`` by default).

    The package manager writes straight to the terminal.
    """

    def __init__(self, command: list[str] | None = None, timeout: float | None = None) -> None:
        self.command = list(command or ["npm", "install"])
        self.timeout = timeout

    async def install(self, project_dir: Path) -> None:
        """Install dependencies inside *project_dir*.

        Raises:
            InstallError: The command failed or timed out.
        """
        cmd_str = " ".join(self.command)
        returncode, _, stderr = await run_command(
            self.command, cwd=project_dir, timeout=self.timeout
        )
        if returncode != 0:
            detail = f"\n{stderr}" if stderr else ""
            raise InstallError(
                f"Dependency install failed (exit {returncode}): {cmd_str}{detail}",
                command=cmd_str,
                returncode=returncode,
            )
