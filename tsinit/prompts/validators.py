"""Answer validation and transformation helpers for the questionnaire.

Validators return ``None`` when the answer is accepted and the localized
error text otherwise, so ``Prompter.text`` can show the message and ask the
same question again.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from tsinit.i18n import MessageId, Messages
from tsinit.models import PROJECT_NAME_PATTERN, RepoURLKind

CANCEL_SENTINEL = "c"

DEFAULT_PORTS = {"https": 443}


def is_cancel(raw: str) -> bool:
    """Return ``True`` if *raw* is the cancel sentinel (case-insensitive)."""
    return raw.strip().lower() == CANCEL_SENTINEL


def validate_project_name(value: str, messages: Messages) -> str | None:
    """Accept letters, digits, underscores and dashes only."""
    if PROJECT_NAME_PATTERN.fullmatch(value):
        return None
    return messages.get(MessageId.INVALID_PROJECT_NAME)


def _url_origin(value: str) -> str | None:
    """Return ``scheme://host[:port]`` for *value*, or ``None`` if it does not parse."""
    try:
        parts = urlsplit(value.strip())
        port = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    scheme = parts.scheme.lower()
    origin = f"{scheme}://{parts.hostname.lower()}"
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        origin += f":{port}"
    return origin


def ssh_url_pattern(host: str) -> re.Pattern[str]:
    """Pattern for ``git@<host>:<owner>/<repo>.git``."""
    return re.compile(rf"^git@{re.escape(host)}:[\w.-]+/[\w.-]+\.git$")


def validate_repo_url(
    value: str,
    kind: RepoURLKind,
    messages: Messages,
    host: str = "github.com",
) -> str | None:
    """Check *value* against the rule for the chosen URL kind.

    https: the URL's origin must be exactly ``https://<host>``.
    ssh: the value must look like ``git@<host>:<owner>/<repo>.git``.
    """
    if RepoURLKind(kind) is RepoURLKind.HTTPS:
        valid = _url_origin(value) == f"https://{host.lower()}"
    else:
        valid = ssh_url_pattern(host).match(value.strip()) is not None

    if valid:
        return None
    return messages.get(MessageId.INVALID_GIT_REPO_URL)


def validate_optional_repo_url(
    value: str,
    kind: RepoURLKind,
    messages: Messages,
    host: str = "github.com",
) -> str | None:
    """Like ``validate_repo_url`` but a blank answer is always accepted."""
    if not value.strip():
        return None
    return validate_repo_url(value, kind, messages, host=host)


def parse_keywords(raw: str) -> list[str]:
    """Split a comma-separated answer into trimmed, non-empty keywords.

    Examples::

        parse_keywords("a, b ,,c ") -> ["a", "b", "c"]
        parse_keywords("")          -> []
    """
    return [token.strip() for token in raw.split(",") if token.strip()]


def repo_name_from_url(url: str) -> str:
    """Repository name from an https or ssh URL (path prefix and ``.git`` removed).

    Examples::

        repo_name_from_url("https://github.com/acme/ts-template")  -> "ts-template"
        repo_name_from_url("git@github.com:acme/ts-template.git")  -> "ts-template"
    """
    name = url.strip().rstrip("/")
    name = re.split(r"[/:]", name)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


def default_package_name(project_name: str) -> str:
    """Default answer for the package-name prompt."""
    return project_name
