"""Single-choice terminal menu used by the start and stop flows."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.prompt import IntPrompt

from svcman.errors import SelectionAbortedError


class Selector(Protocol):
    def select(self, prompt: str, labels: Sequence[str]) -> int:
        """Return the zero-based index of the chosen label."""
        ...


class PromptSelector:
    """Numbered menu read with ``rich.prompt.IntPrompt``."""

    def __init__(self, console: Console | None = None, require_tty: bool = True) -> None:
        self.console = console or Console()
        self.require_tty = require_tty

    def select(self, prompt: str, labels: Sequence[str]) -> int:
        if not labels:
            msg = "Cannot select from an empty list"
            raise ValueError(msg)
        if self.require_tty and not sys.stdin.isatty():
            msg = "Interactive selection requires a terminal"
            raise SelectionAbortedError(msg)

        self.console.print(f"[bold]{prompt}[/bold]")
        for number, label in enumerate(labels, 1):
            self.console.print(f"  [cyan]{number}[/cyan]. {label}", highlight=False)

        try:
            choice = IntPrompt.ask(
                "Choice",
                console=self.console,
                choices=[str(number) for number in range(1, len(labels) + 1)],
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError) as exc:
            msg = "Selection aborted"
            raise SelectionAbortedError(msg) from exc
        return choice - 1
