import dataclasses

import pytest

from cttlex.tokens import Token, TokenType


def test_str_of_identifier():
    assert str(Token(TokenType.ID, "abc", 3)) == "[ID,abc,3]"


def test_str_of_end_of_file_has_empty_lexeme():
    assert str(Token(TokenType.END_OF_FILE, "", 1)) == "[END_OF_FILE,,1]"


@pytest.mark.parametrize(
    "kind, lexeme",
    [
        (TokenType.INT_LITERAL, "42"),
        (TokenType.BITWISE_AND, "&"),
        (TokenType.LE, "<="),
        (TokenType.ERROR, "@"),
    ],
)
def test_str_uses_kind_name(kind, lexeme):
    text = str(Token(kind, lexeme, 7))
    assert text == "[" + kind.name + "," + lexeme + ",7]"


def test_kind_order_matches_declaration():
    rendered = [str(Token(kind, "", 1)) for kind in TokenType]
    assert rendered[0] == "[FUNC,,1]"
    assert rendered[-2:] == ["[END_OF_FILE,,1]", "[ERROR,,1]"]
    assert (
        rendered.index("[ID,,1]")
        < rendered.index("[INT_LITERAL,,1]")
        < rendered.index("[ADD,,1]")
    )


def test_kind_lookup_by_name():
    assert str(Token(TokenType["COLON"], ":", 1)) == "[COLON,:,1]"
    with pytest.raises(KeyError):
        TokenType["WS"]


def test_tokens_compare_by_value():
    assert Token(TokenType.VAR, "var", 2) == Token(TokenType.VAR, "var", 2)
    assert Token(TokenType.VAR, "var", 2) != Token(TokenType.VAR, "var", 3)


def test_token_is_immutable():
    token = Token(TokenType.IF, "if", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.line = 5
    assert token.line == 1
    assert str(token) == "[IF,if,1]"