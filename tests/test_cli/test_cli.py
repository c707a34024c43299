"""Tests for the arithlex command-line entry point."""

from arithlex import __version__
from arithlex.cli import main


def run(capsys, *args: str) -> tuple[int, list[str]]:
    """Run the CLI and return (exit code, stdout lines)."""
    code = main(list(args))
    return code, capsys.readouterr().out.splitlines()


class TestDemo:
    def test_no_arguments_lexes_demo_expression(self, capsys):
        code, lines = run(capsys)
        assert code == 0
        assert lines == [
            "(NUMBER 11)",
            "(BINARYOP +)",
            "(NUMBER 22)",
            "(BINARYOP -)",
            "(NUMBER 33)",
        ]


class TestCommands:
    def test_lex_expression(self, capsys):
        code, lines = run(capsys, "lex", "3-4")
        assert code == 0
        assert lines == ["(NUMBER 3)", "(NUMBER -4)"]

    def test_lex_empty_expression_prints_nothing(self, capsys):
        code, lines = run(capsys, "lex", "   ")
        assert code == 0
        assert lines == []

    def test_tokenize_file(self, capsys, tmp_path):
        path = tmp_path / "expr.txt"
        path.write_text("1 | 2\n", encoding="utf-8")
        code, lines = run(capsys, "tokenize", str(path))
        assert code == 0
        assert lines == ["(NUMBER 1)", "(BINARYOP |)", "(NUMBER 2)"]

    def test_help(self, capsys):
        code, lines = run(capsys, "--help")
        assert code == 0
        assert lines[0].startswith("arithlex CLI")

    def test_version(self, capsys):
        code, lines = run(capsys, "--version")
        assert code == 0
        assert lines == [f"arithlex {__version__}"]


class TestErrors:
    def test_unrecognized_input_is_reported(self, capsys):
        code, lines = run(capsys, "lex", "5 & 3")
        assert code == 1
        assert len(lines) == 1
        assert lines[0].startswith("Lexer error: ")
        assert "offset 2" in lines[0]

    def test_file_error_names_file(self, capsys, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("1\n2 $", encoding="utf-8")
        code, lines = run(capsys, "tokenize", str(path))
        assert code == 1
        assert f"{path}:2:3:" in lines[0]

    def test_missing_file(self, capsys, tmp_path):
        code, lines = run(capsys, "tokenize", str(tmp_path / "nope.txt"))
        assert code == 1
        assert lines[0].startswith("Error: file not found")

    def test_missing_argument(self, capsys):
        code, lines = run(capsys, "lex")
        assert code == 1
        assert "requires an expression" in lines[0]

    def test_unknown_command(self, capsys):
        code, lines = run(capsys, "evaluate", "1+1")
        assert code == 1
        assert lines[0] == "Error: unknown command 'evaluate'"
