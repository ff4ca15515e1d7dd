import io

import pytest
from rich.console import Console

from prompts import (
    NOT_AN_INTEGER,
    inventory_context,
    quantity_context,
    request_integer,
    validate_integer,
)


@pytest.mark.parametrize("text", ["5g", "-5g", "9 9", "", "abc"])
def test_non_numeric_input(text):
    assert validate_integer(text, 0, 2) == (None, NOT_AN_INTEGER)


def test_values_beyond_int_range():
    assert validate_integer("99999999999999999999", 0, 2) == (
        None,
        "Input is too high. Please enter an integer between 0 and 2.",
    )
    assert validate_integer("-99999999999999999999", 0, 2) == (
        None,
        "Input is too low. Please enter an integer between 0 and 2.",
    )


def test_menu_range_messages():
    assert validate_integer("3", 0, 2)[1] == "Input is too high. Please enter an integer between 0 and 2."
    assert validate_integer("-1", 0, 2)[1] == "Input is too low. Please enter an integer between 0 and 2."
    assert validate_integer(" 1 ", 0, 2) == (1, None)


def test_inventory_messages():
    context = inventory_context("hamburger bun")
    assert validate_integer("80", 0, 75, context)[1] == (
        "Exceeded max hamburger bun capacity (75). Please enter a valid inventory."
    )
    assert validate_integer("-3", 0, 75, context)[1] == "Invalid input. Please enter a valid inventory."


def test_quantity_messages():
    context = quantity_context("chilidogs")
    assert validate_integer("9", 0, 8, context)[1] == (
        "Exceeded quantity of chilidogs available (8). Please enter a valid quantity."
    )
    assert validate_integer("-1", 0, 8, context)[1] == "Invalid input. Please enter a valid quantity."
    assert validate_integer("0", 0, 8, context) == (0, None)


def test_request_integer_reprompts_until_valid(monkeypatch):
    answers = iter(["x", "12", "4"])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    output = io.StringIO()
    console = Console(file=output, width=120)

    value = request_integer(console, "Enter quantity (max 5): ", 0, 5, quantity_context("hotdogs"))

    assert value == 4
    text = output.getvalue()
    assert NOT_AN_INTEGER in text
    assert "Exceeded quantity of hotdogs available (5)." in text
    assert text.count("Enter quantity (max 5): ") == 3


@pytest.mark.parametrize("text", ["1_0", "٣", "0x10", "+"])
def test_only_plain_decimal_digits_are_accepted(text):
    assert validate_integer(text, 0, 75) == (None, NOT_AN_INTEGER)


def test_signed_input():
    assert validate_integer("+3", 0, 5) == (3, None)
    assert validate_integer("-0", 0, 5) == (0, None)
