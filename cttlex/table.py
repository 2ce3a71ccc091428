"""Transition table and state queries used by the lexer's scanner."""

from __future__ import annotations

from .dfa import DEAD, START, build_dfa
from .tokens import TokenType

__all__ = [
    "DEAD",
    "START",
    "STATE_COUNT",
    "WHITESPACE_STATE",
    "next_state",
    "state_token_type",
    "is_accepting",
    "is_whitespace",
]

_DFA = build_dfa()

STATE_COUNT = len(_DFA.states)

# The single state that accepts a run of blanks, tabs and line breaks.
WHITESPACE_STATE = next(
    number for number in range(STATE_COUNT) if _DFA.is_whitespace(number)
)


def _valid(state: int) -> bool:
    return 0 <= state < STATE_COUNT


def next_state(state: int, char: str) -> int:
    """Return the state reached from ``state`` on ``char``.

    Characters outside 7-bit ASCII lead to the dead state.
    """
    if not _valid(state):
        raise IndexError(f"no such DFA state: {state}")
    return _DFA.step(state, char)


def state_token_type(state: int) -> TokenType:
    """Return the token kind that ``state`` accepts, or ERROR if none."""
    if not _valid(state):
        return TokenType.ERROR
    return _DFA.token_type(state)


def is_accepting(state: int) -> bool:
    """Tell whether ``state`` ends a token: anything but the start and dead states."""
    return state not in (START, DEAD)


def is_whitespace(state: int) -> bool:
    """Tell whether ``state`` accepts whitespace."""
    return state == WHITESPACE_STATE