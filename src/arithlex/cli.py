"""arithlex CLI entry point.

Usage:
    arithlex                        Lex the demo expression "11 + 22 - 33"
    arithlex lex <expression>       Display the tokens of an expression
    arithlex tokenize <file>        Display the tokens of a file
"""

from __future__ import annotations

import sys
from pathlib import Path

from arithlex.lexer.lexer import Lexer, LexerError

DEMO_INPUT = "11 + 22 - 33"


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if len(args) < 1:
        return _cmd_tokenize(DEMO_INPUT, "<demo>")

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from arithlex import __version__
        print(f"arithlex {__version__}")
        return 0

    if command == "lex":
        if len(args) < 2:
            print("Error: command 'lex' requires an expression argument")
            return 1
        return _cmd_tokenize(args[1], "<argv>")

    if command == "tokenize":
        if len(args) < 2:
            print("Error: command 'tokenize' requires a file argument")
            return 1
        filepath = Path(args[1])
        if not filepath.exists():
            print(f"Error: file not found: {filepath}")
            return 1
        return _cmd_tokenize(filepath.read_text(encoding="utf-8"), str(filepath))

    print(f"Error: unknown command '{command}'")
    print(__doc__.strip())
    return 1


def _cmd_tokenize(source: str, filename: str) -> int:
    """Display the token stream, one token per line."""
    try:
        tokens = Lexer(source, filename).tokenize()
    except LexerError as e:
        print(f"Lexer error: {e}")
        return 1

    for tok in tokens:
        print(tok)
    return 0


if __name__ == "__main__":
    sys.exit(main())
