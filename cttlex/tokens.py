"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of lexical units of the language."""

    FUNC = auto()  # func
    VAR = auto()  # var
    IF = auto()  # if
    GOTO = auto()  # goto
    RETURN = auto()  # return
    INT = auto()  # int
    BOOL = auto()  # bool
    ID = auto()  # identifier
    INT_LITERAL = auto()  # integer literal
    ADD = auto()  # +
    SUB = auto()  # -
    MUL = auto()  # *
    DIV = auto()  # /
    EQ = auto()  # ==
    NEQ = auto()  # !=
    LT = auto()  # <
    GT = auto()  # >
    LE = auto()  # <=
    GE = auto()  # >=
    AND = auto()  # &&
    OR = auto()  # ||
    NOT = auto()  # !
    BITWISE_AND = auto()  # &
    BITWISE_OR = auto()  # |
    BITWISE_NOT = auto()  # ~
    ASSIGN = auto()  # =
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    COLON = auto()  # :
    END_OF_FILE = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Token:
    """A lexical unit: its kind, the text it was read from and its line."""

    type: TokenType
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"[{self.type.name},{self.lexeme},{self.line}]"