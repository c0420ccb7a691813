"""Data models for field configuration, edit ranges, and completion events."""

from __future__ import annotations

from dataclasses import dataclass, replace

from digit_field.errors import ConfigurationError


@dataclass(frozen=True)
class FieldConfiguration:
    """Bounds and completion policy for a fixed-width number field.

    Instances are immutable snapshots.  Every ``with_*`` method returns a
    new, validated snapshot; when validation fails a
    :class:`ConfigurationError` is raised and the caller keeps the
    snapshot it already had.
    """

    digit_count: int = 2
    min_value: int = 1
    max_value: int = 99
    allow_deletion_after_full: bool = False

    def __post_init__(self) -> None:
        if self.digit_count < 1:
            raise ConfigurationError(
                f"digit_count must be at least 1, got {self.digit_count}"
            )
        if self.min_value < 0:
            raise ConfigurationError(
                f"min_value must not be negative, got {self.min_value}"
            )
        if self.min_value >= self.max_value:
            raise ConfigurationError(
                f"min_value ({self.min_value}) must be less than "
                f"max_value ({self.max_value})"
            )

    def with_digit_count(self, digit_count: int) -> FieldConfiguration:
        """Return a copy with a different digit count."""
        return replace(self, digit_count=digit_count)

    def with_min_value(self, min_value: int) -> FieldConfiguration:
        """Return a copy with a different lower bound.

        Raises:
            ConfigurationError: If *min_value* is not below ``max_value``.
        """
        return replace(self, min_value=min_value)

    def with_max_value(self, max_value: int) -> FieldConfiguration:
        """Return a copy with a different upper bound.

        Raises:
            ConfigurationError: If *max_value* is not above ``min_value``.
        """
        return replace(self, max_value=max_value)

    def with_allow_deletion_after_full(self, allow: bool) -> FieldConfiguration:
        """Return a copy with a different completion policy."""
        return replace(self, allow_deletion_after_full=allow)

    def clamp(self, value: int) -> int:
        """Clamp *value* into ``[min_value, max_value]``."""
        return max(self.min_value, min(value, self.max_value))


@dataclass(frozen=True)
class EditRange:
    """The span of the current text an edit replaces."""

    start: int
    length: int = 0

    @property
    def end(self) -> int:
        """Return the index one past the last replaced character."""
        return self.start + self.length

    def fits(self, text: str) -> bool:
        """Return True if this range lies within *text*."""
        return self.start >= 0 and self.length >= 0 and self.end <= len(text)

    def splice(self, text: str, replacement: str) -> str:
        """Return *text* with this range replaced by *replacement*."""
        return text[: self.start] + replacement + text[self.end :]


@dataclass(frozen=True)
class CompletionEvent:
    """Signal that a field cannot usefully grow any further.

    ``remainder`` is the integer parsed from the keystroke that triggered
    completion, not the accumulated field value, so that a consumer can
    carry the extra digit over to another field.
    """

    remainder: int


@dataclass(frozen=True)
class EditDecision:
    """Outcome of a proposed edit.

    ``accept`` tells the host whether to apply the raw edit itself.  The
    state machine renders every change on its own, so it is always False.
    """

    accept: bool = False
    completion: CompletionEvent | None = None

    def __bool__(self) -> bool:
        return self.accept
