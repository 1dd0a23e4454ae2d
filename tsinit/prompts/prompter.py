"""Prompt engine adapter built on ``rich.prompt``.

``Prompter`` offers the two question shapes the questionnaire needs:

* ``text``   - free text with optional validation, cancel sentinel, filter
               and display transformer.
* ``select`` - one option out of a short numbered list.

A validation failure re-asks the same question; it never escapes this module.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from tsinit.errors import OperationCanceled
from tsinit.prompts.validators import is_cancel
from tsinit.utils import console as default_console

Validator = Callable[[str], "str | None"]


class _LineStream:
    """Wraps an input stream so an exhausted stream ends the prompt like a closed terminal."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def readline(self) -> str:
        line = self.stream.readline()
        if not line:
            raise EOFError("input stream exhausted")
        return line


class Prompter:
    """Collects answers from the user through a Rich console.

    Args:
        console: Console used for questions and error messages.
        stream: Optional input stream; ``None`` reads from the terminal.
            Tests pass an ``io.StringIO`` with one answer per line.
            An exhausted stream raises ``EOFError``, as ``input()`` does.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or default_console
        self.stream = _LineStream(stream) if stream is not None else None

    def _ask(self, prompt: str, default: str | None = None) -> str:
        kwargs: dict[str, Any] = {"console": self.console, "stream": self.stream}
        if default is not None:
            kwargs["default"] = default
            kwargs["show_default"] = bool(default)
        answer = (Prompt.ask(prompt, **kwargs) or "").strip()
        # lines read from a stream keep their newline, so rich skips the default
        if not answer and default is not None:
            return default
        return answer

    def _echo(self, text: str) -> None:
        self.console.print(f"  [cyan]>[/cyan] {escape(text)}")

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        validate: Validator | None = None,
        cancelable: bool = False,
        filter: Callable[[str], Any] | None = None,
        transformer: Callable[[Any], str] | None = None,
    ) -> Any:
        """Ask for a single line of text.

        Args:
            message: Question shown to the user.
            default: Returned when the user just presses Enter.
            validate: Returns ``None`` to accept or an error message to show
                before asking again.
            cancelable: If ``True`` the cancel sentinel raises
                ``OperationCanceled`` instead of being validated.
            filter: Converts the accepted answer into the returned value.
            transformer: Renders the final value for the confirmation echo.

        Raises:
            OperationCanceled: The user typed the cancel sentinel.
        """
        while True:
            raw = self._ask(f"[bold]?[/bold] {escape(message)}", default=default)

            if cancelable and is_cancel(raw):
                raise OperationCanceled(message)

            if validate is not None:
                error = validate(raw)
                if error:
                    self.console.print(f"[bold red]>> {escape(error)}[/bold red]")
                    continue

            value = filter(raw) if filter is not None else raw
            if transformer is not None:
                self._echo(transformer(value))
            return value

    def select(
        self,
        message: str,
        choices: Sequence[str],
        *,
        default: str | None = None,
        labels: Sequence[str] | None = None,
        filter: Callable[[str], Any] | None = None,
    ) -> Any:
        """Ask the user to pick one entry of *choices*.

        The options are listed with their position; the user may answer with
        the number, the choice itself or its label (case-insensitive).

        Args:
            message: Question shown to the user.
            choices: Values to choose from.
            default: Value returned on an empty answer; must be in *choices*.
            labels: Display text for each choice (defaults to the choices).
            filter: Converts the selected choice into the returned value.
        """
        if not choices:
            raise ValueError("select() needs at least one choice")
        if default is not None and default not in choices:
            raise ValueError(f"default {default!r} is not one of {list(choices)!r}")
        labels = list(labels) if labels is not None else list(choices)
        if len(labels) != len(choices):
            raise ValueError("labels and choices must have the same length")

        lookup: dict[str, str] = {}
        for index, (choice, label) in enumerate(zip(choices, labels), 1):
            lookup[str(index)] = choice
            lookup[choice.lower()] = choice
            lookup[label.lower()] = choice

        self.console.print(f"[bold]?[/bold] {escape(message)}")
        for index, label in enumerate(labels, 1):
            self.console.print(f"  {index}. {escape(label)}")

        default_index = str(choices.index(default) + 1) if default is not None else None
        while True:
            raw = self._ask("  [dim]>[/dim]", default=default_index)
            selected = lookup.get(raw.lower())
            if selected is None:
                self.console.print(
                    "[prompt.invalid.choice]Please select one of the available options"
                )
                continue
            return filter(selected) if filter is not None else selected
