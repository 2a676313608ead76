"""
minicc Compiler Driver
======================

This module provides the main compiler interface for minicc. It
orchestrates the compilation stages:

    Source → Lex → Parse → Generate → Assembly file

Only lexical analysis is implemented. Parsing and code generation are
placeholders that acknowledge the request and succeed; the assembly
stage writes an empty .s file next to the source.

Usage
-----
Command line:
    $ mcc --lex hello.c

Programmatic:
    >>> from minicc.frontend.compiler import MiniCCompiler, Stage
    >>> result = MiniCCompiler().run(Stage.LEX, "hello.c")
    >>> result.tokens
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from minicc.errors import AssemblyWriteError
from minicc.frontend.ast import ProgramNode
from minicc.frontend.lexer import CLexer, CToken
from minicc.frontend.loader import load_source

logger = logging.getLogger(__name__)

C_EXTENSION = ".c"
ASM_EXTENSION = ".s"


class Stage(Enum):
    """Compilation stage selected on the command line."""
    LEX = "lex"
    PARSE = "parse"
    CODEGEN = "codegen"
    ASSEMBLY = "assembly"


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        encoding: Text encoding used to read source files
        allow_unterminated_comments: If True, a block comment left open
            at end of input silently ends the scan. If False (default),
            it raises UnterminatedCommentError.
        output: Assembly output path. None means the source path with
            its .c extension replaced by .s.
    """
    encoding: str = "utf-8"
    allow_unterminated_comments: bool = False
    output: Optional[Path] = None


@dataclass
class CompilerResult:
    """
    Outcome of a compiler run.

    Attributes:
        filename: Source path that was requested
        stage: The stage that was run (None for the full pipeline)
        tokens: Scanned tokens, when the run included lexing
        assembly_path: Written assembly file, when the run produced one
    """
    filename: str
    stage: Optional[Stage] = None
    tokens: list[CToken] = field(default_factory=list)
    assembly_path: Optional[Path] = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)


def is_c_source(path: Union[str, Path]) -> bool:
    """Return True if the path carries the required .c extension."""
    return str(path).endswith(C_EXTENSION)


def assembly_path_for(path: Union[str, Path]) -> Path:
    """
    Derive the assembly file name for a source file.

    Examples:
        hello.c       → hello.s
        dir/prog.c    → dir/prog.s
    """
    text = str(path)
    if text.endswith(C_EXTENSION):
        text = text[: -len(C_EXTENSION)]
    return Path(text + ASM_EXTENSION)


class MiniCCompiler:
    """
    Compiler driver for minicc.

    Example:
        compiler = MiniCCompiler(CompilerOptions(allow_unterminated_comments=True))
        tokens = compiler.lex_file("hello.c")

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    # =========================================================================
    # Stages
    # =========================================================================

    def lex_source(self, source: str, filename: str = "<input>") -> list[CToken]:
        """
        Scan source text into tokens.

        Raises:
            LexError: On the first malformed construct
        """
        lexer = CLexer(
            source,
            filename,
            allow_unterminated_comments=self.options.allow_unterminated_comments,
        )
        return lexer.tokenize()

    def lex_file(self, path: Union[str, Path]) -> list[CToken]:
        """
        Load a source file and scan it.

        Raises:
            SourceUnavailableError: If the file cannot be opened or decoded
            LexError: On the first malformed construct
        """
        source = load_source(path, self.options.encoding)
        return self.lex_source(source, str(path))

    def parse(self, tokens: list[CToken]) -> Optional[ProgramNode]:
        """Parsing is not implemented yet; no tree is produced."""
        logger.info(f"Parser not implemented; ignoring {len(tokens)} tokens")
        return None

    def generate(self, program: Optional[ProgramNode]) -> str:
        """Code generation is not implemented yet; emits no assembly."""
        logger.info("Code generator not implemented; emitting empty assembly")
        return ""

    def emit_assembly(
        self,
        source_path: Union[str, Path],
        assembly: str = "",
    ) -> Path:
        """
        Write the assembly output file.

        Args:
            source_path: The .c source the output is named after
            assembly: Assembly text to write (empty until codegen exists)

        Returns:
            Path of the written file

        Raises:
            AssemblyWriteError: If the file cannot be created
        """
        output = self.options.output or assembly_path_for(source_path)
        try:
            Path(output).write_text(assembly, encoding="utf-8")
        except OSError as e:
            raise AssemblyWriteError(str(output)) from e

        logger.info(f"Wrote assembly file {output}")
        return Path(output)

    # =========================================================================
    # Driver
    # =========================================================================

    def run(self, stage: Optional[Stage], path: Union[str, Path]) -> CompilerResult:
        """
        Run one stage, or the full pipeline when stage is None.

        PARSE and CODEGEN only acknowledge the request. ASSEMBLY writes
        the (empty) assembly file without reading the source.

        Raises:
            MiniCError: If loading, scanning or writing fails
        """
        logger.info(f"Running stage {stage.value if stage else 'all'} on {path}")
        result = CompilerResult(filename=str(path), stage=stage)

        if stage is Stage.LEX:
            result.tokens = self.lex_file(path)
        elif stage is Stage.ASSEMBLY:
            result.assembly_path = self.emit_assembly(path)
        elif stage is None:
            result.tokens = self.lex_file(path)
            program = self.parse(result.tokens)
            assembly = self.generate(program)
            result.assembly_path = self.emit_assembly(path, assembly)

        return result
