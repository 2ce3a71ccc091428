# cttlex

A lexer for CTT, a small C-like language. A fixed DFA transition table
drives it. A companion tool builds that DFA from an NFA with the subset
construction.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Tokenizing a file

```
cttlex path/to/main.ctt
```

If you give no path, the command reads `../main.ctt`. It prints one token
per line as `[TYPE,lexeme,line]`. The last line is always an
`END_OF_FILE` token:

```
[FUNC,func,1]
[ID,main,1]
[LPAREN,(,1]
[RPAREN,),1]
...
[END_OF_FILE,,3]
```

If the file cannot be read, the command prints a message to standard
error and exits with status 1.

## Using the library

```python
from cttlex.lexer import Lexer, tokenize
from cttlex.tokens import TokenType

for item in tokenize("var x: int = 42;"):
    print(item)

lexer = Lexer("if a <= b { return a; }")
first = lexer.next_token()
assert first.type is TokenType.IF
```

`tokenize` returns every token, and `END_OF_FILE` is always the last one.
Iterating over a `Lexer` gives the same tokens. Each `Token` is a frozen
dataclass with the fields `type`, `lexeme` and `line`. Its `str()` is the
`[TYPE,lexeme,line]` form shown above.

Lexing rules:

- The lexer uses maximal munch.
- A keyword wins over an identifier with the same spelling.
- Whitespace (blank, tab, `\n`, `\r`) is skipped. The line number goes up
  at each newline.
- A character that starts no token, including any non-ASCII character, is
  returned on its own as an `ERROR` token. Lexing then continues after it.

`cttlex.table` exposes the state queries that the lexer uses:
`next_state`, `state_token_type`, `is_accepting` and `is_whitespace`. It
also has the constants `DEAD`, `START`, `STATE_COUNT` and
`WHITESPACE_STATE`.

### Token types

Keywords: `FUNC`, `VAR`, `IF`, `GOTO`, `RETURN`, `INT`, `BOOL`.

Identifiers and literals: `ID`, `INT_LITERAL`.

Operators: `ADD` `+`, `SUB` `-`, `MUL` `*`, `DIV` `/`, `EQ` `==`,
`NEQ` `!=`, `LT` `<`, `GT` `>`, `LE` `<=`, `GE` `>=`, `AND` `&&`,
`OR` `||`, `NOT` `!`, `BITWISE_AND` `&`, `BITWISE_OR` `|`,
`BITWISE_NOT` `~`, `ASSIGN` `=`.

Punctuation: `COMMA`, `SEMICOLON`, `LPAREN`, `RPAREN`, `LBRACE`,
`RBRACE`, `COLON`.

Special: `END_OF_FILE`, `ERROR`.

## Deriving the DFA

```
cttlex-dfa
```

This command builds the token NFA and runs the subset construction over
the 7-bit ASCII alphabet. It then prints a report in three parts:

- each DFA state, with the NFA states it contains and the token it accepts;
- a switch that maps accepting states to token types;
- the full transition table.

State 0 is the dead state and state 1 is the start state.

You can do the same from Python:

```python
from cttlex.dfa import build_dfa, format_report

dfa = build_dfa()
print(format_report(dfa))
```

`build_nfa` and `subset_construction` are also available if you want to
run the construction on other node sets.

## What it does not do

This package only lexes. It has no parser, no interpreter and no code
generator for CTT programs.

## Running the tests

```
pytest
```