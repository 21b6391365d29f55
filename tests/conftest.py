"""Shared automata for engine tests."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

import pytest

from dfalex import CONTINUE, DISCARD, Abort, ContinueWith, Done
from dfalex.config import reset_lex_config


class DigitState(Enum):
    START = auto()
    RUN = auto()


class DigitAutomaton:
    """Digit runs separated by spaces; a run may end at end of input."""

    def start(self) -> DigitState:
        return DigitState.START

    def decide(self, state: DigitState, char: str) -> Any:
        match state, char:
            case DigitState.START, " ":
                return DISCARD
            case DigitState.START, c if c.isdigit():
                return ContinueWith(DigitState.RUN)
            case DigitState.RUN, c if c.isdigit():
                return CONTINUE
            case DigitState.RUN, _:
                return Done("Num", consume=False)
            case _:
                return Abort(char)

    def finalize_at_end(self, state: DigitState) -> str | None:
        return "Num" if state is DigitState.RUN else None


class Recording:
    """Wraps an automaton and records every decide call."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner
        self.calls: list[tuple[Any, str]] = []
        self.finalized: list[Any] = []

    def start(self) -> Any:
        return self.inner.start()

    def decide(self, state: Any, char: str) -> Any:
        self.calls.append((state, char))
        return self.inner.decide(state, char)

    def finalize_at_end(self, state: Any) -> Any:
        self.finalized.append(state)
        return self.inner.finalize_at_end(state)


@pytest.fixture
def digits() -> DigitAutomaton:
    return DigitAutomaton()


@pytest.fixture
def recording() -> type[Recording]:
    return Recording


@pytest.fixture(autouse=True)
def _default_config():
    reset_lex_config()
    yield
    reset_lex_config()
