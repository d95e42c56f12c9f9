"""Interactive questions shared by the default loop and the installer."""
from __future__ import annotations

from rich.prompt import Confirm, Prompt


def ask_text(question: str, default: str = "") -> str:
    try:
        return Prompt.ask(question, default=default, show_default=False).strip()
    except EOFError:
        return default


def confirm(question: str, default: bool = True) -> bool:
    """Ask a yes/no question; end of input counts as no."""
    try:
        return Confirm.ask(question, default=default)
    except EOFError:
        return False
