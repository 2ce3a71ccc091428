"""Table-driven DFA lexer for the CTT language, with a DFA derivation tool."""

__version__ = "1.0.0"
__all__ = ["cli", "dfa", "lexer", "table", "tokens"]