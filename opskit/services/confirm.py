"""
Confirmation gate implementations.

PromptConfirmer asks on the terminal. StaticConfirmer gives a fixed
answer and is what tests inject.
"""

import click

from ..core.interfaces.confirmer import IConfirmer

AFFIRMATIVE = frozenset({"y", "yes"})


def is_affirmative(answer: str | None) -> bool:
    """True only for 'y' or 'yes' in any case, ignoring surrounding blanks."""
    if answer is None:
        return False
    return answer.strip().lower() in AFFIRMATIVE


class PromptConfirmer(IConfirmer):
    """
    Prompts on stdin and waits indefinitely for one line.

    Unlike click.confirm, an unrecognized answer is a decline rather
    than a re-prompt.
    """

    def confirm(self, message: str) -> bool:
        try:
            answer = click.prompt(
                f"{message} [y/N]",
                default="",
                show_default=False,
                prompt_suffix=": ",
            )
        except click.Abort:
            click.echo("", err=True)
            return False
        return is_affirmative(answer)


class StaticConfirmer(IConfirmer):
    """Answers every question the same way and remembers what was asked."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.asked: list[str] = []

    def confirm(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer
