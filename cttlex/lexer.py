"""Table-driven lexer that turns source text into tokens."""

from __future__ import annotations

from typing import Iterator

from .table import DEAD, START, is_accepting, is_whitespace, next_state, state_token_type
from .tokens import Token, TokenType

__all__ = ["Lexer", "tokenize"]


class Lexer:
    """Reads tokens one at a time from a source string.

    Each call to :meth:`next_token` runs the DFA as far as it goes, then
    backs up to the last accepting state (longest match). Whitespace is
    skipped. A character that starts no token is returned on its own as
    an ERROR token and scanning carries on after it.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._state = START
        self._begin = 0
        self._end = 0
        self._line = 1

    def _at_eof(self) -> bool:
        return self._end == len(self._source)

    def _advance(self) -> str:
        char = self._source[self._end]
        self._end += 1
        if char == "\n":
            self._line += 1
        return char

    def _retreat(self) -> None:
        self._end -= 1
        if self._source[self._end] == "\n":
            self._line -= 1

    def _lexeme(self) -> str:
        return self._source[self._begin:self._end]

    def _reset(self) -> None:
        self._state = START
        self._begin = self._end

    def next_token(self) -> Token:
        """Return the next token; END_OF_FILE once the source is used up."""
        while True:
            if self._at_eof():
                return Token(TokenType.END_OF_FILE, "", self._line)

            history = [self._state]
            while self._state != DEAD and not self._at_eof():
                self._state = next_state(self._state, self._advance())
                history.append(self._state)

            skipped_whitespace = False
            while history[-1] != START:
                self._state = history.pop()
                if is_accepting(self._state):
                    if is_whitespace(self._state):
                        self._reset()
                        skipped_whitespace = True
                        break
                    token = Token(state_token_type(self._state), self._lexeme(), self._line)
                    self._reset()
                    return token
                self._retreat()

            if skipped_whitespace:
                continue

            # Nothing matched: report the single offending character and move past it.
            self._end += 1
            token = Token(TokenType.ERROR, self._lexeme(), self._line)
            self._reset()
            return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the END_OF_FILE token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END_OF_FILE:
                return


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``, ending with END_OF_FILE."""
    return list(Lexer(source))