"""
Line-based operator input with retry.

Wraps rich's Prompt/IntPrompt so every read either returns a valid value
or asks again. End of input propagates as EOFError to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from quizcli.delivery.visuals import get_prompt


class Prompter:
    """Reads operator input from a console."""

    def __init__(self, console: Console, pause_enabled: bool = True):
        self.console = console
        self.pause_enabled = pause_enabled

    def ask_text(self, label: str, kind: str = "default") -> str:
        """Free text; may be empty."""
        return Prompt.ask(get_prompt(kind, label), console=self.console)

    def ask_int(self, label: str, kind: str = "default") -> int:
        """Integer; re-asks until the line parses."""
        return IntPrompt.ask(get_prompt(kind, label), console=self.console)

    def ask_positive_int(self, label: str) -> int:
        """Integer greater than zero."""
        while True:
            value = self.ask_int(label)
            if value > 0:
                return value
            self.console.print("[yellow]Please enter a number greater than 0.[/yellow]")

    def ask_choice(self, label: str, allowed: Sequence[str], kind: str = "default") -> str:
        """
        Single lowercase letter from ``allowed``.

        Only the first character of the line counts, so "True" reads as "t".
        """
        while True:
            line = Prompt.ask(get_prompt(kind, f"{label} ({'/'.join(allowed)})"), console=self.console)
            if line:
                char = line[0].lower()
                if char in allowed:
                    return char
            self.console.print(f"[yellow]Invalid input. Allowed: {', '.join(allowed)}[/yellow]")

    def pause(self, message: str = "Press enter to continue...") -> None:
        if not self.pause_enabled:
            return
        Prompt.ask(f"[dim]{message}[/dim]", console=self.console, default="", show_default=False)
