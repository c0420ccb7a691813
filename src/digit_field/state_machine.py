"""Digit-entry state machine behind the number field.

The machine owns the field's display text.  A host (a widget, or a test)
forwards focus, keystroke and blur events to it and draws whatever text
it renders; the host never applies a raw edit on its own.

Completion is reported through ``on_completion`` and also returned as
part of the :class:`EditDecision`.  The callback runs synchronously from
inside :meth:`InputStateMachine.propose_change`, after the new display
text and the reset flag have been committed, so it may safely call back
into the machine (for example to move focus to another field).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from digit_field.formatter import format_value, is_digits, parse_value, render_slots
from digit_field.models import (
    CompletionEvent,
    EditDecision,
    EditRange,
    FieldConfiguration,
)

logger = logging.getLogger(__name__)

CompletionHandler = Callable[[int], None]
RenderHandler = Callable[[str], None]


class InputStateMachine:
    """Validate keystrokes for a fixed-width number field.

    The machine is Idle until :meth:`begin_editing` and returns to Idle on
    :meth:`end_editing`.  Between the two, :meth:`propose_change` decides
    each edit against the current :class:`FieldConfiguration`.
    """

    def __init__(
        self,
        config: FieldConfiguration | None = None,
        on_completion: CompletionHandler | None = None,
        on_render: RenderHandler | None = None,
    ) -> None:
        """Initialize the machine with the field at its minimum value.

        Args:
            config: Bounds and completion policy.  Defaults to a two-digit
                field accepting 1 to 99.
            on_completion: Called with the remainder digit whenever input
                completes.
            on_render: Called with the display text whenever it is redrawn.
        """
        self._config = config or FieldConfiguration()
        self.on_completion = on_completion
        self.on_render = on_render
        self._display_text = ""
        self._editing = False
        self._reset_on_next_edit = False
        self.value = self._config.min_value

    # --- Configuration ---

    @property
    def config(self) -> FieldConfiguration:
        """The current configuration snapshot."""
        return self._config

    @config.setter
    def config(self, config: FieldConfiguration) -> None:
        self._config = config
        self.clamp_value()

    @property
    def digit_count(self) -> int:
        return self._config.digit_count

    @digit_count.setter
    def digit_count(self, digit_count: int) -> None:
        config = self._config.with_digit_count(digit_count)
        changed = config.digit_count != self._config.digit_count
        self._config = config
        if changed:
            # Existing digits are redrawn over the new slots, never truncated.
            self._render()

    @property
    def min_value(self) -> int:
        return self._config.min_value

    @min_value.setter
    def min_value(self, min_value: int) -> None:
        self._config = self._config.with_min_value(min_value)
        self.clamp_value()

    @property
    def max_value(self) -> int:
        return self._config.max_value

    @max_value.setter
    def max_value(self, max_value: int) -> None:
        self._config = self._config.with_max_value(max_value)
        self.clamp_value()

    @property
    def allow_deletion_after_full(self) -> bool:
        """Whether a full field waits for an overflowing keystroke to complete."""
        return self._config.allow_deletion_after_full

    @allow_deletion_after_full.setter
    def allow_deletion_after_full(self, allow: bool) -> None:
        self._config = self._config.with_allow_deletion_after_full(allow)

    # --- Value ---

    @property
    def display_text(self) -> str:
        """The digits the field currently shows."""
        return self._display_text

    @property
    def editing(self) -> bool:
        """True between :meth:`begin_editing` and :meth:`end_editing`."""
        return self._editing

    @property
    def reset_on_next_edit(self) -> bool:
        """True until the first edit after :meth:`begin_editing` is decided."""
        return self._reset_on_next_edit

    @property
    def value(self) -> int:
        """The field value, or ``min_value`` when the text is empty."""
        return parse_value(self._display_text, self._config.min_value)

    @value.setter
    def value(self, value: int) -> None:
        self.set_value(value)
        self.clamp_value()

    def set_value(self, value: int) -> None:
        """Show *value* as-is, without clamping it into the bounds."""
        self._display_text = format_value(value, self._config.digit_count)
        self._render()

    def clamp_value(self) -> None:
        """Clamp the current value into ``[min_value, max_value]``."""
        self.set_value(self._config.clamp(self.value))

    def slots(self) -> list[str | None]:
        """Return the display text laid out over the field's slots."""
        return render_slots(self._display_text, self._config.digit_count)

    # --- Editing session ---

    def begin_editing(self) -> None:
        """Start a focus session; the next typed text replaces the field."""
        self._editing = True
        self._reset_on_next_edit = True
        logger.debug("begin editing with %r", self._display_text)

    def propose_change(
        self,
        current_text: str,
        edit_range: EditRange,
        replacement: str,
    ) -> EditDecision:
        """Decide an edit replacing *edit_range* of *current_text*.

        Accepted edits are rendered by the machine itself, so the returned
        decision never asks the host to apply the edit.

        Replacements that are not decimal digits are rejected before any
        other rule applies, leaving the reset flag untouched, so the display
        text only ever holds digits.

        Args:
            current_text: The text the edit applies to.
            edit_range: The span being replaced.
            replacement: The typed or pasted text; empty for a deletion.

        Returns:
            The decision, carrying a completion event when input completed.
        """
        if not edit_range.fits(current_text):
            logger.debug("rejecting %r: range %s out of bounds", replacement, edit_range)
            return EditDecision()
        if replacement and not is_digits(replacement):
            logger.debug("rejecting %r: not decimal digits", replacement)
            return EditDecision()

        is_deletion = not replacement
        if self._reset_on_next_edit and not is_deletion:
            candidate = replacement
        else:
            candidate = edit_range.splice(current_text, replacement)
        self._reset_on_next_edit = False

        config = self._config
        candidate_value = parse_value(candidate, config.min_value)

        if candidate_value > config.max_value:
            logger.debug("rejecting %r: %d exceeds %d", candidate, candidate_value, config.max_value)
            return self._complete(replacement)

        if len(candidate) > config.digit_count:
            logger.debug("rejecting %r: longer than %d digits", candidate, config.digit_count)
            return EditDecision()

        self._display_text = candidate
        self._render()

        if len(candidate) == config.digit_count and not config.allow_deletion_after_full:
            return self._complete(replacement)
        return EditDecision()

    def type_text(self, text: str) -> EditDecision:
        """Propose appending *text* at the end of the display text."""
        current = self._display_text
        return self.propose_change(current, EditRange(len(current)), text)

    def delete_backward(self) -> EditDecision:
        """Propose deleting the last character of the display text."""
        current = self._display_text
        edit_range = EditRange(len(current) - 1, 1) if current else EditRange(0)
        return self.propose_change(current, edit_range, "")

    def end_editing(self) -> None:
        """End the focus session, leaving the value clamped and reformatted."""
        self._editing = False
        self._reset_on_next_edit = False
        self.set_value(self._config.clamp(self.value))
        logger.debug("end editing with %r", self._display_text)

    # --- Side effects ---

    def _complete(self, replacement: str) -> EditDecision:
        event = CompletionEvent(remainder=parse_value(replacement, 0))
        logger.debug("input complete, remainder %d", event.remainder)
        if self.on_completion is not None:
            self.on_completion(event.remainder)
        return EditDecision(completion=event)

    def _render(self) -> None:
        if self.on_render is not None:
            self.on_render(self._display_text)
