"""
Interactive prompts and the fixed texts shown around them.

LEARNING NOTES:
- Business logic (identity.py, the config --reset command) never calls
  input() directly; it receives an InputSource
- In the real CLI that is ConsoleInput (Rich's Prompt); in tests it is a
  scripted fake that returns canned answers
- typing.Protocol means "anything with an ask() method" - no subclassing
  required

This module centralizes user-facing text, making it easy to:
- Reword messages without touching logic code
- Assert on exact questions in tests
"""

from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt


# ============================================================================
# Fixed Texts
# ============================================================================

SETUP_INSTRUCTIONS = """
[bold]🔧 First time setup required![/bold]
You need to configure your Clerk User ID.
You can find this by going to https://minimado.com and clicking the profile icon on the top right.
"""

USER_ID_QUESTION = "Enter your Clerk User ID"

RESET_QUESTION = "Are you sure you want to reset all configuration? (y/N)"

CONFIRM_ANSWERS = ("y", "yes")


# ============================================================================
# Input Sources
# ============================================================================

class InputSource(Protocol):
    """Something that can ask the user a question and return one line."""

    def ask(self, question: str) -> str:
        ...


class ConsoleInput:
    """Reads answers from the terminal using Rich's Prompt."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console

    def ask(self, question: str) -> str:
        try:
            answer = Prompt.ask(question, console=self.console, default="", show_default=False)
        except EOFError:
            # stdin closed (piped or non-interactive): treat as no answer
            return ""
        return answer.strip()


def is_confirmation(answer: str) -> bool:
    """Only "y" or "yes" (any case) count as a yes."""
    return answer.strip().lower() in CONFIRM_ANSWERS
