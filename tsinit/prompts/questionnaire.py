"""The interactive question sequence that fills in ``ProjectAnswers``.

Steps, in order:

 1. language            (select, sets the run's language)
 2. repository URL kind (select, https/ssh)
 3. project name        (validated, cancelable)
 4. template URL        (validated for the chosen kind, cancelable)
 5. branch              (optional)
 6. new remote URL      (optional, validated when given, cancelable)
 7. package name        (defaults to the project name)
 8. description, author
 9. license             (defaults to ``Config.default_license``)
10. keywords            (comma separated)
11. main branch name    (select, master/main)

A failed validation re-asks the same step. Typing the cancel sentinel at
steps 3, 4 or 6 raises ``OperationCanceled``; nothing has been created at
that point.
"""

from __future__ import annotations

from functools import partial

from tsinit.config import Config
from tsinit.i18n import LANGUAGE_LABELS, Language, MessageId, Messages
from tsinit.models import MainBranch, ProjectAnswers, RepoURLKind
from tsinit.prompts.prompter import Prompter
from tsinit.prompts.validators import (
    default_package_name,
    parse_keywords,
    validate_optional_repo_url,
    validate_project_name,
    validate_repo_url,
)


def _format_keywords(keywords: list[str]) -> str:
    return "[" + ", ".join(keywords) + "]"


class Questionnaire:
    """Asks every question and returns the collected ``ProjectAnswers``."""

    def __init__(self, prompter: Prompter, messages: Messages, config: Config) -> None:
        self.prompter = prompter
        self.messages = messages
        self.config = config

    def ask(self) -> ProjectAnswers:
        """Run the full question sequence.

        Raises:
            OperationCanceled: The user typed the cancel sentinel.
        """
        msg = self.messages.get
        host = self.config.template_host

        language = self.prompter.select(
            msg(MessageId.SELECT_LANGUAGE),
            [lang.value for lang in Language],
            default=self.messages.language.value,
            labels=[LANGUAGE_LABELS[lang] for lang in Language],
            filter=Language,
        )
        self.messages.set_language(language)

        kind = self.prompter.select(
            msg(MessageId.REPO_URL_TYPE),
            [k.value for k in RepoURLKind],
            default=RepoURLKind.HTTPS.value,
            filter=RepoURLKind,
        )

        project_name = self.prompter.text(
            msg(MessageId.PROJECT_NAME),
            validate=partial(validate_project_name, messages=self.messages),
            cancelable=True,
        )

        template_url = self.prompter.text(
            msg(MessageId.REPO_URL),
            validate=partial(validate_repo_url, kind=kind, messages=self.messages, host=host),
            cancelable=True,
        )

        branch_name = self.prompter.text(msg(MessageId.BRANCH_NAME), default="")

        new_repo_url = self.prompter.text(
            msg(MessageId.NEW_REPO_URL),
            default="",
            validate=partial(
                validate_optional_repo_url, kind=kind, messages=self.messages, host=host
            ),
            cancelable=True,
        )

        package_name = self.prompter.text(
            msg(MessageId.PACKAGE_NAME), default=default_package_name(project_name)
        )
        description = self.prompter.text(msg(MessageId.DESCRIPTION), default="")
        author = self.prompter.text(msg(MessageId.AUTHOR), default="")
        license_name = self.prompter.text(
            msg(MessageId.LICENSE), default=self.config.default_license
        )
        keywords = self.prompter.text(
            msg(MessageId.KEYWORDS),
            default="",
            filter=parse_keywords,
            transformer=_format_keywords,
        )

        main_branch = self.prompter.select(
            msg(MessageId.MAIN_BRANCH_NAME),
            [b.value for b in MainBranch],
            default=self.config.default_main_branch.value,
            filter=MainBranch,
        )

        return ProjectAnswers(
            project_name=project_name,
            repo_url_kind=kind,
            template_url=template_url,
            branch_name=branch_name,
            new_repo_url=new_repo_url,
            package_name=package_name or project_name,
            description=description,
            author=author,
            license=license_name or self.config.default_license,
            keywords=keywords,
            main_branch=main_branch,
        )
