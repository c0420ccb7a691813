"""Shared test fixtures."""

from __future__ import annotations

import pytest

from digit_field.models import FieldConfiguration
from digit_field.state_machine import InputStateMachine


class Recorder:
    """Collects completion remainders and rendered texts from a machine."""

    def __init__(self) -> None:
        self.completions: list[int] = []
        self.renders: list[str] = []

    def on_completion(self, remainder: int) -> None:
        self.completions.append(remainder)

    def on_render(self, text: str) -> None:
        self.renders.append(text)


@pytest.fixture
def recorder() -> Recorder:
    """A fresh recorder."""
    return Recorder()


@pytest.fixture
def machine(recorder: Recorder) -> InputStateMachine:
    """A machine with the default configuration wired to the recorder."""
    return InputStateMachine(
        on_completion=recorder.on_completion,
        on_render=recorder.on_render,
    )


@pytest.fixture
def make_machine(recorder: Recorder):
    """Factory for machines with custom configuration wired to the recorder."""

    def _make(**config) -> InputStateMachine:
        return InputStateMachine(
            FieldConfiguration(**config),
            on_completion=recorder.on_completion,
            on_render=recorder.on_render,
        )

    return _make

