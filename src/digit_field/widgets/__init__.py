"""Textual widgets for digit-by-digit number entry."""

from __future__ import annotations

from digit_field.widgets.number_field import DigitSlot, NumberField

__all__ = ["DigitSlot", "NumberField"]
