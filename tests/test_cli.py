"""
Tests for mcc - minicc Command-Line Interface
=============================================

These tests drive the click command through CliRunner and check the
printed status lines, the files written and the exit codes.
"""

import pytest
from click.testing import CliRunner

from minicc import __version__
from minicc.cli.errors import ExitCode
from minicc.cli.mcc import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "return_2.c"
    path.write_text("int main(void) {\n    return 2;\n}\n")
    return path


# =============================================================================
# Help and Version
# =============================================================================

class TestHelp:
    """Tests for --help and --version."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "--lex" in result.output
        assert "--codegen" in result.output
        assert "-S" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Lex Mode
# =============================================================================

class TestLexMode:
    """Tests for --lex."""

    def test_prints_tokens(self, runner, source_file):
        result = runner.invoke(main, ["--lex", str(source_file)])
        assert result.exit_code == ExitCode.SUCCESS
        lines = result.output.splitlines()
        assert lines[0] == f"Performing lexical analysis on {source_file}"
        assert lines[1] == "Token(INT, 'int', 1:1)"
        assert lines[2] == "Token(IDENTIFIER, 'main', 1:5)"
        assert lines[-1] == "Token(RBRACE, '}', 3:1)"
        assert len(lines) == 11

    def test_flag_after_path(self, runner, source_file):
        result = runner.invoke(main, [str(source_file), "--lex"])
        assert result.exit_code == 0
        assert "Token(CONSTANT, '2', 2:12)" in result.output

    def test_lex_error(self, runner, tmp_path):
        path = tmp_path / "bad.c"
        path.write_text("int main(void) { return 123abc; }")
        result = runner.invoke(main, ["--lex", str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "malformed numeric constant '123a'" in result.output

    def test_unsupported_operator(self, runner, tmp_path):
        path = tmp_path / "div.c"
        path.write_text("int main(void) { return 4 / 2; }")
        result = runner.invoke(main, ["--lex", str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unsupported operator '/'" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["--lex", str(tmp_path / "missing.c")])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "could not open file" in result.output
        assert "No such file or directory" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "latin.c"
        path.write_bytes(b"int caf\xe9;")
        result = runner.invoke(main, ["--lex", str(path)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "could not decode" in result.output

    def test_encoding_option(self, runner, tmp_path):
        path = tmp_path / "latin.c"
        path.write_bytes(b"// caf\xe9\nint")
        result = runner.invoke(main, ["--lex", "--encoding", "latin-1", str(path)])
        assert result.exit_code == 0
        assert "Token(INT, 'int', 2:1)" in result.output

    def test_unterminated_comment(self, runner, tmp_path):
        path = tmp_path / "open.c"
        path.write_text("int main /* never closed")
        result = runner.invoke(main, ["--lex", str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unterminated block comment" in result.output

        result = runner.invoke(
            main, ["--lex", "--allow-unterminated-comments", str(path)]
        )
        assert result.exit_code == 0
        assert "Token(IDENTIFIER, 'main', 1:5)" in result.output


# =============================================================================
# Placeholder Modes
# =============================================================================

class TestPlaceholderModes:
    """--parse and --codegen only announce themselves and succeed."""

    def test_parse(self, runner, source_file):
        result = runner.invoke(main, ["--parse", str(source_file)])
        assert result.exit_code == 0
        assert result.output.strip() == f"Performing parsing on {source_file}"

    def test_codegen(self, runner, source_file):
        result = runner.invoke(main, ["--codegen", str(source_file)])
        assert result.exit_code == 0
        assert result.output.strip() == f"Performing code generation on {source_file}"

    def test_parse_does_not_read_source(self, runner, tmp_path):
        result = runner.invoke(main, ["--parse", str(tmp_path / "missing.c")])
        assert result.exit_code == 0


# =============================================================================
# Assembly Mode
# =============================================================================

class TestAssemblyMode:
    """Tests for -s / -S."""

    def test_creates_empty_file(self, runner, source_file):
        result = runner.invoke(main, ["-S", str(source_file)])
        expected = source_file.with_suffix(".s")
        assert result.exit_code == 0
        assert f"Generated assembly file: {expected}" in result.output
        assert expected.exists()
        assert expected.read_text() == ""

    def test_lowercase_flag(self, runner, source_file):
        result = runner.invoke(main, ["-s", str(source_file)])
        expected = source_file.with_suffix(".s")
        assert result.exit_code == 0
        assert f"Generated assembly file: {expected}" in result.output
        assert expected.read_text() == ""

    def test_long_option(self, runner, source_file):
        result = runner.invoke(main, ["--assembly", str(source_file)])
        assert result.exit_code == 0
        assert source_file.with_suffix(".s").exists()

    def test_output_option(self, runner, source_file, tmp_path):
        output = tmp_path / "custom.s"
        result = runner.invoke(main, ["-S", "-o", str(output), str(source_file)])
        assert result.exit_code == 0
        assert output.exists()

    def test_write_failure(self, runner, source_file, tmp_path):
        output = tmp_path / "missing_dir" / "out.s"
        result = runner.invoke(main, ["-S", "-o", str(output), str(source_file)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "failed to create assembly file" in result.output


# =============================================================================
# Full Pipeline
# =============================================================================

class TestFullPipeline:
    """Invocation without a mode flag."""

    def test_compiles(self, runner, source_file):
        result = runner.invoke(main, [str(source_file)])
        expected = source_file.with_suffix(".s")
        assert result.exit_code == 0
        assert f"Compiled {source_file} -> {expected}" in result.output
        assert expected.exists()

    def test_verbose(self, runner, source_file):
        result = runner.invoke(main, ["-v", str(source_file)])
        assert result.exit_code == 0
        assert "Tokenized: 10 tokens" in result.output

    def test_lex_error_writes_nothing(self, runner, tmp_path):
        path = tmp_path / "bad.c"
        path.write_text("int _;")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert not (tmp_path / "bad.s").exists()


# =============================================================================
# Argument Errors
# =============================================================================

class TestArgumentErrors:
    """Bad invocations exit non-zero with a message."""

    def test_missing_path(self, runner):
        result = runner.invoke(main, ["--lex"])
        assert result.exit_code == 2
        assert "Missing argument" in result.output

    def test_wrong_extension(self, runner, tmp_path):
        path = tmp_path / "prog.txt"
        path.write_text("int")
        result = runner.invoke(main, ["--lex", str(path)])
        assert result.exit_code == 2
        assert ".c extension" in result.output

    def test_unknown_option(self, runner, source_file):
        result = runner.invoke(main, ["--optimize", str(source_file)])
        assert result.exit_code == 2
        assert "No such option" in result.output

    @pytest.mark.parametrize("flags", [
        ["--lex", "--parse"],
        ["--codegen", "-s"],
        ["--lex", "--parse", "--codegen", "--assembly"],
    ])
    def test_conflicting_modes(self, runner, source_file, flags):
        result = runner.invoke(main, [*flags, str(source_file)])
        assert result.exit_code == 2
        assert "Only one mode may be given" in result.output
        assert not source_file.with_suffix(".s").exists()

    def test_repeated_mode_is_accepted(self, runner, source_file):
        result = runner.invoke(main, ["--lex", "--lex", str(source_file)])
        assert result.exit_code == 0
        assert "Token(INT, 'int', 1:1)" in result.output
