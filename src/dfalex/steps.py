"""Step directives: what the engine does with the current character.

An automaton's ``decide`` returns exactly one of these for every
(state, character) pair:

=====================  ========  ==============  ===========================
Directive              Consumes  Next state      Emits
=====================  ========  ==============  ===========================
``DISCARD``            yes       start           nothing (whitespace, comments)
``CONTINUE``           yes       unchanged       nothing
``ContinueWith(s)``    yes       ``s``           nothing
``Done(tok)``          yes       start           ``tok``, lexeme includes char
``Done(tok, False)``   no        start           ``tok``, char re-offered
``Abort(err)``         yes       terminal        one error, then end of stream
=====================  ========  ==============  ===========================

``Done(tok, consume=False)`` is one-character lookahead: after reading
``<`` and peeking a character that is not ``=`` or ``>``, finish ``<``
and leave the peeked character for the next lexeme.

Thread Safety:
All directives are frozen dataclasses; ``DISCARD`` and ``CONTINUE`` are
shared singletons.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

S = TypeVar("S")
T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Discard:
    """Drop the lexeme so far, including the current character."""

    def __repr__(self) -> str:
        return "DISCARD"


@dataclass(frozen=True, slots=True)
class Continue:
    """Consume the current character and stay in the same state."""

    def __repr__(self) -> str:
        return "CONTINUE"


@dataclass(frozen=True, slots=True)
class ContinueWith(Generic[S]):
    """Consume the current character and move to ``state``."""

    state: S


@dataclass(frozen=True, slots=True)
class Done(Generic[T]):
    """Finish the current lexeme as ``token``.

    Attributes:
        token: Client token value for the finished lexeme
        consume: Whether the current character belongs to this lexeme.
            When False the character is inspected again from the start state.

    """

    token: T
    consume: bool = True


@dataclass(frozen=True, slots=True)
class Abort(Generic[E]):
    """Stop lexing: the current character has no valid transition.

    The engine emits one error result (its lexeme includes the current
    character) and then ends the stream for good.
    """

    error: E


DISCARD = Discard()
CONTINUE = Continue()

Step: TypeAlias = Discard | Continue | ContinueWith[S] | Done[T] | Abort[E]

STEP_TYPES = (Discard, Continue, ContinueWith, Done, Abort)

__all__ = [
    "CONTINUE",
    "DISCARD",
    "STEP_TYPES",
    "Abort",
    "Continue",
    "ContinueWith",
    "Discard",
    "Done",
    "Step",
]
