"""Reading and rewriting the template's ``package.json``.

The manifest is handled as a plain dict so fields this tool does not know
about (scripts, dependencies, ...) pass through untouched and keep their
order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tsinit.errors import TsInitError
from tsinit.models import ProjectAnswers
from tsinit.utils import dump_json, load_json, write_text_atomic


class ManifestError(TsInitError):
    """Raised when the manifest cannot be parsed or has an unexpected shape."""


class Manifest:
    """An in-memory ``package.json`` bound to its file path."""

    def __init__(self, path: Path, data: dict[str, Any], trailing_newline: bool = True) -> None:
        self.path = path
        self.data = data
        self.trailing_newline = trailing_newline

    @classmethod
    def load(cls, path: Path) -> "Manifest":
        """Read *path* as UTF-8 JSON.

        Raises:
            FileNotFoundError: The file does not exist.
            ManifestError: The file is not a JSON object.
        """
        try:
            data = load_json(path)
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too
            raise ManifestError(f"{path} is not a valid manifest: {exc}") from exc
        raw = path.read_text(encoding="utf-8")
        return cls(path, data, trailing_newline=raw.endswith("\n"))

    def _sub_object(self, key: str) -> dict[str, Any]:
        """Return ``data[key]``, creating an empty object when it is missing."""
        value = self.data.get(key)
        if value is None:
            value = {}
            self.data[key] = value
        if not isinstance(value, dict):
            raise ManifestError(
                f"{self.path}: expected '{key}' to be an object, "
                f"found {type(value).__name__}"
            )
        return value

    def apply(self, answers: ProjectAnswers, version: str = "1.0.0") -> None:
        """Overwrite the project metadata fields from *answers*."""
        self.data["name"] = answers.effective_package_name
        self.data["version"] = version
        self.data["description"] = answers.description
        self.data["author"] = answers.author
        self.data["license"] = answers.license
        self.data["keywords"] = list(answers.keywords)
        repository = self._sub_object("repository")
        repository.setdefault("type", "git")
        repository["url"] = answers.repository_url
        self._sub_object("bugs")["url"] = answers.bugs_url
        self.data["homepage"] = answers.homepage

    def save(self) -> None:
        """Write the manifest back with 2-space indentation, replacing the file atomically."""
        write_text_atomic(self.path, dump_json(self.data, trailing_newline=self.trailing_newline))
