"""Convert between field values and their display text."""

from __future__ import annotations


def is_digits(text: str) -> bool:
    """Return True if *text* is a non-empty run of ASCII digits."""
    return text.isascii() and text.isdigit()


def format_value(value: int, digit_count: int) -> str:
    """Format *value* for display in a field of *digit_count* slots.

    The value is written in plain decimal without zero padding: ``5`` in a
    two-digit field displays as ``"5"`` with the second slot left blank.

    Args:
        value: The integer to format.
        digit_count: Number of slots in the field.  Unused slots are
            blanked by :func:`render_slots`, not filled here.

    Returns:
        A string that :func:`parse_value` turns back into *value*.
    """
    return str(value)


def parse_value(text: str, fallback: int) -> int:
    """Parse field text as a base-10 integer.

    Only plain runs of ASCII digits are accepted.  Empty text, signs,
    whitespace and anything else that is not a digit yield *fallback*
    instead of raising.

    Args:
        text: The display text or keystroke to parse.
        fallback: Value returned when *text* is not a number.

    Returns:
        The parsed integer, or *fallback*.
    """
    if not is_digits(text):
        return fallback
    return int(text)


def render_slots(display_text: str, digit_count: int) -> list[str | None]:
    """Lay *display_text* out over *digit_count* left-aligned slots.

    Args:
        display_text: The text the field currently holds.
        digit_count: Number of slots to fill.

    Returns:
        One entry per slot: the character shown there, or None for a
        blank slot.  Characters past the last slot are not shown.
    """
    return [
        display_text[index] if index < len(display_text) else None
        for index in range(digit_count)
    ]
