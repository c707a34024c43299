"""arithlex lexer — tokenizer for integer arithmetic expressions."""

from arithlex.lexer.tokens import Token, TokenType
from arithlex.lexer.lexer import Lexer, LexerError, UnrecognizedInputError, lex

__all__ = ["Token", "TokenType", "Lexer", "LexerError", "UnrecognizedInputError", "lex"]
