"""arithlex — a small scanner for integer arithmetic expressions."""

from arithlex.lexer import Lexer, LexerError, Token, TokenType, UnrecognizedInputError, lex

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "UnrecognizedInputError",
    "lex",
    "__version__",
]
