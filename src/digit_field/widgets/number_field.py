"""Fixed-width number field widget with per-digit slots."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from digit_field.models import FieldConfiguration
from digit_field.state_machine import CompletionHandler, InputStateMachine


class DigitSlot(Static):
    """A single character cell of a :class:`NumberField`.

    Blank slots are hidden rather than showing a zero.
    """

    def __init__(self, digit: str | None = None, **kwargs) -> None:
        """Initialize the slot showing *digit*, or hidden when None."""
        super().__init__(digit or "", **kwargs)
        self.digit = digit
        self.display = digit is not None

    def show(self, digit: str | None) -> None:
        """Show *digit* in this slot, or hide the slot when None."""
        self.digit = digit
        self.display = digit is not None
        self.update(digit or "")


class NumberField(Widget, can_focus=True):
    """A focusable field that accepts a bounded number typed digit by digit.

    Digit keys are sent to an :class:`InputStateMachine`, which decides
    whether they fit the bounds and redraws the slots.  Navigation keys
    such as tab pass through.  When the field cannot usefully grow any
    further a :class:`NumberField.Completed` message is posted carrying
    the last typed digit.
    """

    DEFAULT_CSS = """
    NumberField {
        layout: horizontal;
        width: auto;
        height: 3;
        border: round $secondary;
        padding: 0 1;
    }
    NumberField:focus {
        border: round $accent;
    }
    NumberField DigitSlot {
        width: 1;
        margin: 0 1 0 0;
    }
    """

    class Completed(Message):
        """Posted when a number field completes its input."""

        def __init__(self, number_field: NumberField, remainder: int) -> None:
            """Initialize the message.

            Args:
                number_field: The field that completed.
                remainder: The digit typed last, to carry over elsewhere.
            """
            super().__init__()
            self.number_field = number_field
            self.remainder = remainder

        @property
        def control(self) -> NumberField:
            """The field that completed."""
            return self.number_field

    def __init__(
        self,
        *,
        digit_count: int = 2,
        min_value: int = 1,
        max_value: int = 99,
        allow_deletion_after_full: bool = False,
        on_completion: CompletionHandler | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        """Initialize the field at its minimum value.

        Args:
            digit_count: Number of digit slots.
            min_value: Smallest value the field settles on.
            max_value: Largest value a keystroke may produce.
            allow_deletion_after_full: Wait for an overflowing keystroke
                before completing a full field.
            on_completion: Called synchronously with the remainder digit
                when input completes, before the message is posted.
            name: The name of the widget.
            id: The ID of the widget in the DOM.
            classes: The CSS classes of the widget.
            disabled: Whether the widget is disabled.

        Raises:
            ConfigurationError: If the bounds or digit count are invalid.
        """
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self.on_completion = on_completion
        self._machine = InputStateMachine(
            FieldConfiguration(
                digit_count=digit_count,
                min_value=min_value,
                max_value=max_value,
                allow_deletion_after_full=allow_deletion_after_full,
            ),
            on_completion=self._handle_completion,
            on_render=self._show_digits,
        )

    def compose(self) -> ComposeResult:
        """Create one slot per digit."""
        for digit in self._machine.slots():
            yield DigitSlot(digit)

    # --- Programmatic API ---

    @property
    def machine(self) -> InputStateMachine:
        """The state machine deciding this field's edits."""
        return self._machine

    @property
    def display_text(self) -> str:
        """The digits currently shown."""
        return self._machine.display_text

    @property
    def value(self) -> int:
        return self._machine.value

    @value.setter
    def value(self, value: int) -> None:
        self._machine.value = value

    @property
    def digit_count(self) -> int:
        return self._machine.digit_count

    @digit_count.setter
    def digit_count(self, digit_count: int) -> None:
        changed = digit_count != self._machine.digit_count
        self._machine.digit_count = digit_count
        if changed and self.is_mounted:
            self.refresh(recompose=True)

    @property
    def min_value(self) -> int:
        return self._machine.min_value

    @min_value.setter
    def min_value(self, min_value: int) -> None:
        self._machine.min_value = min_value

    @property
    def max_value(self) -> int:
        return self._machine.max_value

    @max_value.setter
    def max_value(self, max_value: int) -> None:
        self._machine.max_value = max_value

    @property
    def allow_deletion_after_full(self) -> bool:
        return self._machine.allow_deletion_after_full

    @allow_deletion_after_full.setter
    def allow_deletion_after_full(self, allow: bool) -> None:
        self._machine.allow_deletion_after_full = allow

    def focus_with_value(self, initial_value: int) -> bool:
        """Show *initial_value* unclamped and move focus to this field.

        Returns:
            True if the field can take focus.
        """
        self._machine.set_value(initial_value)
        if not self.focusable:
            return False
        self.focus()
        return True

    # --- Event handlers ---

    def _on_focus(self, event: events.Focus) -> None:
        self._machine.begin_editing()

    def _on_blur(self, event: events.Blur) -> None:
        self._machine.end_editing()

    async def _on_key(self, event: events.Key) -> None:
        """Send digits and backspace to the state machine; let other keys through."""
        if event.key == "backspace":
            event.prevent_default()
            event.stop()
            self._machine.delete_backward()
            return

        char = event.character
        if char and char.isascii() and char.isdigit():
            event.prevent_default()
            event.stop()
            self._machine.type_text(char)

    def _handle_completion(self, remainder: int) -> None:
        if self.on_completion is not None:
            self.on_completion(remainder)
        self.post_message(self.Completed(self, remainder))

    def _show_digits(self, display_text: str) -> None:
        if not self.is_mounted:
            return
        slots = list(self.query(DigitSlot))
        for slot, digit in zip(slots, self._machine.slots()):
            slot.show(digit)
