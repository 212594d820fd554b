"""
Line-based operator prompts rendered through Rich.
"""

from __future__ import annotations

from typing import IO, Optional

from rich.console import Console
from rich.markup import escape

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def is_affirmative(answer: str, default_yes: bool = True) -> bool:
    """
    Interpret a yes/no answer.

    An empty answer accepts the default; otherwise only y/yes (any case)
    count as yes. Anything else is a no, there is no re-prompt.
    """
    normalized = answer.strip().lower()
    if normalized == "":
        return default_yes
    return normalized in AFFIRMATIVE_ANSWERS


class ConsolePrompt:
    """
    Read single lines of operator input.

    Args:
        console: Console used to render the question.
        stream: Optional input stream; defaults to the terminal.
    """

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None) -> None:
        self.console = console or Console()
        self.stream = stream

    def _read_line(self, message: str) -> str:
        try:
            return self.console.input(f"[bold cyan]{escape(message)}[/]: ", stream=self.stream)
        except EOFError:
            return ""

    def ask_text(self, message: str) -> str:
        """Show `message` and return the trimmed answer (empty on end of input)."""
        return self._read_line(message).strip()

    def ask_yes_no(self, prompt_text: str, default_yes: bool = True) -> bool:
        return is_affirmative(self._read_line(prompt_text), default_yes)
