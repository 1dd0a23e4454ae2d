"""tsinit command-line entry point.

Usage::

    tsinit
    python -m tsinit -C ~/projects

Exit codes: 0 when the flow finishes or the user cancels, 1 on an error.
A template without ``package.json`` is reported but is not an error exit.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from tsinit import __version__
from tsinit.config import Config
from tsinit.errors import OperationCanceled, TsInitError
from tsinit.i18n import MessageId, Messages
from tsinit.models import ProjectAnswers
from tsinit.project import InitResult, ProjectInitializer
from tsinit.prompts import Prompter, Questionnaire
from tsinit.prompts.validators import repo_name_from_url
from tsinit.utils import console, print_error, print_summary_table, print_warning


def print_answers(answers: ProjectAnswers, messages: Messages) -> None:
    """Show what is about to be created."""
    template = answers.template_url
    if answers.branch_name:
        template += f" ({answers.branch_name})"
    print_summary_table(
        {
            "project": answers.project_name,
            "template": f"{repo_name_from_url(answers.template_url)} <- {template}",
            "origin": answers.repository_url,
            "package": answers.effective_package_name,
            "license": answers.license,
            "keywords": ", ".join(answers.keywords) or "-",
            "main branch": answers.main_branch.value,
        },
        title=messages.get(MessageId.SUMMARY_TITLE),
    )


def initialize(
    config: Config,
    messages: Messages,
    prompter: Prompter | None = None,
    initializer: ProjectInitializer | None = None,
) -> InitResult:
    """Ask every question, then materialize the project.

    The questionnaire reads the terminal synchronously; only the
    materialization steps run inside the event loop.
    """
    answers = Questionnaire(prompter or Prompter(console), messages, config).ask()
    print_answers(answers, messages)
    initializer = initializer or ProjectInitializer(config, messages)
    return asyncio.run(initializer.run(answers))


def run(
    config: Config,
    messages: Messages,
    prompter: Prompter | None = None,
    initializer: ProjectInitializer | None = None,
) -> int:
    """Run the whole flow and turn its outcome into an exit code.

    This is the only place errors are caught: cancellation becomes a notice
    and exit code 0, every failure a single localized line and exit code 1.
    """
    try:
        initialize(config, messages, prompter, initializer)
    except (OperationCanceled, KeyboardInterrupt, EOFError):
        console.print()
        print_warning(messages.get(MessageId.OPERATION_CANCELED))
        return 0
    except (TsInitError, OSError, ValueError) as exc:
        print_error(messages.format(MessageId.ERROR_OCCURRED, exc))
        return 1
    except Exception as exc:
        print_error(messages.format(MessageId.UNKNOWN_ERROR_OCCURRED, repr(exc)))
        return 1

    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``tsinit`` / ``python -m tsinit``."""
    parser = argparse.ArgumentParser(
        prog="tsinit",
        description="Create a new project from a TypeScript template repository.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tsinit\n"
            "  tsinit -C ~/projects\n"
        ),
    )
    parser.add_argument(
        "--directory", "-C",
        default=None,
        help="Directory in which the project folder is created (default: current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    messages = Messages()
    overrides = {"base_dir": Path(args.directory)} if args.directory else {}
    try:
        config = Config.from_env(**overrides)
    except (ValidationError, ValueError) as exc:
        print_error(messages.format(MessageId.ERROR_OCCURRED, exc))
        sys.exit(1)

    sys.exit(run(config, messages))


if __name__ == "__main__":
    main()
