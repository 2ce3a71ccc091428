"""Builds the lexer's DFA from its NFA by subset construction."""

from __future__ import annotations

import argparse
import string
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .tokens import TokenType

ALPHABET_SIZE = 128
DEAD = 0
START = 1

NODE_COUNT = 94

# NFA start node of every token pattern.
START_NODES: tuple[int, ...] = (
    1, 6, 10, 13, 18, 25, 29, 34, 36, 38, 40, 42, 44, 46, 49, 52, 54,
    56, 59, 62, 65, 68, 70, 72, 74, 76, 78, 80, 82, 84, 86, 88, 90, 92,
)

# Accepting NFA nodes with their token names, highest priority first.
FINAL_STATES: tuple[tuple[int, str], ...] = (
    (5, "FUNC"),
    (9, "VAR"),
    (12, "IF"),
    (17, "GOTO"),
    (24, "RETURN"),
    (28, "INT"),
    (33, "BOOL"),
    (35, "ID"),
    (37, "INT_LITERAL"),
    (39, "ADD"),
    (41, "SUB"),
    (43, "MUL"),
    (45, "DIV"),
    (48, "EQ"),
    (51, "NEQ"),
    (53, "LT"),
    (55, "GT"),
    (58, "LE"),
    (61, "GE"),
    (64, "AND"),
    (67, "OR"),
    (69, "NOT"),
    (71, "BITWISE_AND"),
    (73, "BITWISE_OR"),
    (75, "BITWISE_NOT"),
    (77, "ASSIGN"),
    (79, "COMMA"),
    (81, "SEMICOLON"),
    (83, "LPAREN"),
    (85, "RPAREN"),
    (87, "LBRACE"),
    (89, "RBRACE"),
    (91, "COLON"),
    (93, "WS"),
)

WHITESPACE_LABEL = "WS"

_LITERAL_PATTERNS: tuple[tuple[int, str], ...] = (
    (1, "func"),
    (6, "var"),
    (10, "if"),
    (13, "goto"),
    (18, "return"),
    (25, "int"),
    (29, "bool"),
    (38, "+"),
    (40, "-"),
    (42, "*"),
    (44, "/"),
    (46, "=="),
    (49, "!="),
    (52, "<"),
    (54, ">"),
    (56, "<="),
    (59, ">="),
    (62, "&&"),
    (65, "||"),
    (68, "!"),
    (70, "&"),
    (72, "|"),
    (74, "~"),
    (76, "="),
    (78, ","),
    (80, ";"),
    (82, "("),
    (84, ")"),
    (86, "{"),
    (88, "}"),
    (90, ":"),
)

_WHITESPACE = " \t\n\r"


@dataclass
class NFANode:
    """A node of the NFA: its outgoing edges and whether it accepts."""

    index: int
    next: dict[str, int] = field(default_factory=dict)
    is_final: bool = False


def build_nfa() -> list[NFANode]:
    """Return the NFA nodes recognising every token of the language."""
    nodes = [NFANode(i) for i in range(NODE_COUNT)]

    for start, text in _LITERAL_PATTERNS:
        for offset, char in enumerate(text):
            nodes[start + offset].next[char] = start + offset + 1
        nodes[start + len(text)].is_final = True

    # Identifier: a letter followed by letters and digits.
    nodes[34].next.update(dict.fromkeys(string.ascii_letters, 35))
    nodes[35].next.update(dict.fromkeys(string.ascii_letters + string.digits, 35))
    nodes[35].is_final = True

    # Integer literal: one or more digits.
    nodes[36].next.update(dict.fromkeys(string.digits, 37))
    nodes[37].next.update(dict.fromkeys(string.digits, 37))
    nodes[37].is_final = True

    # Whitespace run.
    nodes[92].next.update(dict.fromkeys(_WHITESPACE, 93))
    nodes[93].next.update(dict.fromkeys(_WHITESPACE, 93))
    nodes[93].is_final = True

    return nodes


def _label_of(state: frozenset[int]) -> str | None:
    return next((name for node, name in FINAL_STATES if node in state), None)


@dataclass(frozen=True)
class DFA:
    """A deterministic automaton over 7-bit ASCII.

    State 0 is the dead state and state 1 the start state.
    """

    states: tuple[frozenset[int], ...]
    table: tuple[tuple[int, ...], ...]
    labels: tuple[str | None, ...]

    def step(self, state: int, char: str) -> int:
        """Return the state reached from ``state`` on ``char``."""
        code = ord(char)
        if code >= ALPHABET_SIZE:
            return DEAD
        return self.table[state][code]

    def token_type(self, state: int) -> TokenType:
        """Return the token kind accepted in ``state``, or ERROR."""
        label = self.labels[state]
        if label is None or label == WHITESPACE_LABEL:
            return TokenType.ERROR
        return TokenType[label]

    def is_whitespace(self, state: int) -> bool:
        """Tell whether ``state`` accepts a run of whitespace."""
        return self.labels[state] == WHITESPACE_LABEL


def subset_construction(nodes: Sequence[NFANode], start: Iterable[int]) -> DFA:
    """Turn the NFA into a DFA, numbering states in discovery order.

    The empty set becomes state 0 and the start set state 1.
    """
    start_set = frozenset(start)
    order: list[frozenset[int]] = [start_set]
    index: dict[frozenset[int], int] = {start_set: 0}
    rows: list[list[int]] = []

    # ``order`` grows while it is walked: every new set is visited in turn.
    for current in order:
        row = []
        for code in range(ALPHABET_SIZE):
            char = chr(code)
            target = frozenset(
                nodes[i].next[char] for i in current if char in nodes[i].next
            )
            if target not in index:
                index[target] = len(order)
                order.append(target)
            row.append(index[target])
        rows.append(row)

    if len(order) < 2:
        raise ValueError("start set yields no dead state to swap with")

    def renumber(i: int) -> int:
        return {0: 1, 1: 0}.get(i, i)

    positions = [1, 0, *range(2, len(order))]
    states = tuple(order[p] for p in positions)
    table = tuple(tuple(renumber(t) for t in rows[p]) for p in positions)
    labels = tuple(_label_of(s) for s in states)
    return DFA(states, table, labels)


def build_dfa() -> DFA:
    """Return the lexer's DFA."""
    return subset_construction(build_nfa(), START_NODES)


def _format_set(state: frozenset[int]) -> str:
    return "[" + ",".join(str(i) for i in sorted(state)) + "]"


def format_report(dfa: DFA) -> str:
    """Describe the DFA: its state sets, the token switch and the table."""
    lines = [
        f"// {DEAD} -> [] (DEAD)",
        f"// {START} -> {_format_set(dfa.states[START])} (START)",
    ]
    by_label: dict[str, list[int]] = {}
    for number in range(2, len(dfa.states)):
        line = f"// {number} -> {_format_set(dfa.states[number])}"
        label = dfa.labels[number]
        if label is not None:
            line += f" ({label})"
            by_label.setdefault(label, []).append(number)
        lines.append(line)

    lines += [
        "",
        "TokenType Lexer::get_token_type() const",
        "{",
        "    switch (status_)",
        "    {",
    ]
    for _, label in FINAL_STATES:
        if label == WHITESPACE_LABEL:
            continue
        cases = "".join(f"case {n} :" for n in by_label.get(label, []))
        lines.append(f"\t\t{cases}return TokenType::{label};")
    lines += [
        "\t\tdefault : return TokenType::ERROR;",
        "    }",
        "}",
        "",
        f"char DFAtran[{len(dfa.states)}][{ALPHABET_SIZE}] = {{",
    ]
    lines += ["{" + ",".join(map(str, row)) + "}," for row in dfa.table]
    lines.append("};")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the DFA report for the lexer."""
    parser = argparse.ArgumentParser(
        description="Print the lexer's DFA states, token switch and transition table."
    )
    parser.parse_args(argv)
    print(format_report(build_dfa()), end="")
    return 0