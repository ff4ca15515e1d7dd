"""Bounded integer prompts with messages tailored to what is being entered."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from rich.console import Console

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Input is treated as a 32-bit signed integer.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

MENU = "menu"
INVENTORY = "inventory"
QUANTITY = "quantity"

NOT_AN_INTEGER = "Invalid input. Please enter an integer."
TOO_HIGH = "Input is too high. Please enter an integer between {min} and {max}."
TOO_LOW = "Input is too low. Please enter an integer between {min} and {max}."

# (above max, below min) templates for each kind of prompt.
RANGE_MESSAGES: Dict[str, Tuple[str, str]] = {
    MENU: (TOO_HIGH, TOO_LOW),
    INVENTORY: (
        "Exceeded max {subject} capacity ({max}). Please enter a valid inventory.",
        "Invalid input. Please enter a valid inventory.",
    ),
    QUANTITY: (
        "Exceeded quantity of {subject} available ({max}). Please enter a valid quantity.",
        "Invalid input. Please enter a valid quantity.",
    ),
}


@dataclass(frozen=True)
class PromptContext:
    kind: str = MENU
    subject: str = ""

    def too_high(self, min_value: int, max_value: int) -> str:
        return RANGE_MESSAGES[self.kind][0].format(min=min_value, max=max_value, subject=self.subject)

    def too_low(self, min_value: int, max_value: int) -> str:
        return RANGE_MESSAGES[self.kind][1].format(min=min_value, max=max_value, subject=self.subject)


MENU_CONTEXT = PromptContext()


def inventory_context(ingredient_name: str) -> PromptContext:
    return PromptContext(kind=INVENTORY, subject=ingredient_name)


def quantity_context(item_plural: str) -> PromptContext:
    return PromptContext(kind=QUANTITY, subject=item_plural)


def validate_integer(
    text: str,
    min_value: int,
    max_value: int,
    context: PromptContext = MENU_CONTEXT,
) -> Tuple[Optional[int], Optional[str]]:
    """Parse ``text`` and check it against ``[min_value, max_value]``.

    Returns the value and ``None`` on success, otherwise ``None`` and the
    message to show the user.
    """
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None, NOT_AN_INTEGER
    value = int(text)

    if value > INT_MAX:
        return None, TOO_HIGH.format(min=min_value, max=max_value)
    if value < INT_MIN:
        return None, TOO_LOW.format(min=min_value, max=max_value)
    if value > max_value:
        return None, context.too_high(min_value, max_value)
    if value < min_value:
        return None, context.too_low(min_value, max_value)
    return value, None


def request_integer(
    console: Console,
    prompt: str,
    min_value: int,
    max_value: int,
    context: PromptContext = MENU_CONTEXT,
) -> int:
    """Keep asking until the user enters an integer in range.

    Raises ``EOFError`` when input runs out.
    """
    while True:
        text = console.input(prompt, markup=False)
        value, error = validate_integer(text, min_value, max_value, context)
        if error is None:
            return value
        console.print(error, markup=False, soft_wrap=True)
