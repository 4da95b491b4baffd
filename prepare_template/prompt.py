from typing import Optional

import click

from prepare_template.models import normalize_tokens


CUSTOMIZE_QUESTION = "Change finding signatures (words) for the finder script? [Y/N]"
TOKENS_QUESTION = "Enter your custom signatures (words) separatedly by commas"

AFFIRMATIVE_ANSWERS = ("Y", "YES")


def is_affirmative(answer: str) -> bool:
    return answer.strip().upper() in AFFIRMATIVE_ANSWERS


def ask_custom_tokens() -> Optional[tuple[str, ...]]:
    """Ask whether to extend the signature list; ``None`` means keep the defaults."""
    answer = click.prompt(
        click.style(CUSTOMIZE_QUESTION, bold=True),
        default="N",
        show_default=False,
    )
    if not is_affirmative(answer):
        return None

    raw = click.prompt(
        click.style(TOKENS_QUESTION, bold=True),
        default="",
        show_default=False,
    )
    return normalize_tokens(raw.split(","))
