"""arithlex lexer — hand-written scanner for integer arithmetic.

Design decisions:
- Rules are tried in a fixed priority order: NUMBER, BINARYOP, whitespace.
  The first rule that matches at the cursor wins and consumes greedily.
- A `-` directly followed by a digit is always part of a NUMBER, so `3-4`
  lexes as NUMBER 3, NUMBER -4.
- Whitespace is consumed and discarded.
- Any other character aborts the whole call with `UnrecognizedInputError`.
"""

from __future__ import annotations

from arithlex.lexer.tokens import Token, TokenType, match_whitespace


class LexerError(Exception):
    """Raised on lexical errors with source location."""

    def __init__(self, message: str, offset: int, line: int, column: int, file: str = "<input>"):
        self.offset = offset
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{file}:{line}:{column}: {message}")


class UnrecognizedInputError(LexerError):
    """Raised when no token rule matches at a scan position."""

    def __init__(self, character: str, offset: int, line: int, column: int, file: str = "<input>"):
        self.character = character
        super().__init__(
            f"Unrecognized character {character!r} at offset {offset}",
            offset, line, column, file,
        )


class Lexer:
    """Tokenizes arithmetic input into a list of `Token` objects.

    Usage::

        tokens = Lexer("11 + 22 - 33").tokenize()
    """

    TOKEN_TYPES = (TokenType.NUMBER, TokenType.BINARYOP)

    def __init__(self, source: str, filename: str = "<input>") -> None:
        self.source = source
        self.filename = filename
        self.pos = 0
        self.tokens: list[Token] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        self.tokens = []
        self.pos = 0

        while not self._at_end():
            self._scan_token()

        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one token or whitespace run at the current position."""
        for token_type in self.TOKEN_TYPES:
            end = token_type.match(self.source, self.pos)
            if end > self.pos:
                self.tokens.append(Token(token_type, self.source[self.pos:end], self.pos))
                self.pos = end
                return

        end = match_whitespace(self.source, self.pos)
        if end > self.pos:
            self.pos = end
            return

        line, column = self._location(self.pos)
        raise UnrecognizedInputError(
            self.source[self.pos], self.pos, line, column, self.filename,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _location(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of a character offset."""
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return line, offset - line_start + 1


def lex(source: str) -> list[Token]:
    """Tokenize `source`, skipping whitespace.

    Raises `UnrecognizedInputError` at the first character no rule matches.
    """
    return Lexer(source).tokenize()
