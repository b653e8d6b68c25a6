"""Validated console input built on click prompts.

click re-prompts on its own when a conversion fails, which gives the
"print error, ask again" loop for range-checked numbers and non-blank text.
"""

from typing import Sequence, Tuple

import click


class NonBlankString(click.ParamType):
    """Free text that must contain something other than whitespace."""

    name = "text"

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            value = str(value)
        if not value.strip():
            self.fail("Input cannot be empty.", param, ctx)
        return value


NON_BLANK = NonBlankString()


def prompt_int(text: str, bounds: Tuple[int, int]) -> int:
    lo, hi = bounds
    return click.prompt(text, type=click.IntRange(lo, hi))


def prompt_text(text: str) -> str:
    return click.prompt(text, type=NON_BLANK)


def prompt_menu(title: str, options: Sequence[str], text: str = "Enter your choice") -> int:
    """Print a numbered menu and return the 1-based selection."""
    click.echo(f"\n  {title}")
    for i, option in enumerate(options, start=1):
        click.echo(f"  {i:>2}. {option}")
    return prompt_int(text, (1, len(options)))
