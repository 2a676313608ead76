"""
minicc - A Small C-Subset Compiler
==================================

This package provides the front end of a compiler for a tiny subset of
C: enough to tokenize a program made of one function returning one
integer constant.

Main Components
---------------
- **frontend**: lexer, source loader, AST definitions and driver
- **cli**: the `mcc` command-line tool

Quick Start
-----------
    >>> from minicc import scan
    >>> tokens = scan("int main(void) { return 2; }", "main.c")

Or use the command-line tool:
    $ mcc --lex main.c
    $ mcc -S main.c
"""

__version__ = "0.1.0"

from minicc.errors import (
    MiniCError,
    CompilerError,
    SourceLocation,
    SourceUnavailableError,
    SourceOpenError,
    SourceDecodeError,
    AssemblyWriteError,
)
from minicc.frontend import (
    CLexer,
    CToken,
    CTokenType,
    CompilerOptions,
    LexError,
    MiniCCompiler,
    Stage,
    scan,
)

__all__ = [
    "__version__",
    # Exception hierarchy
    "MiniCError",
    "CompilerError",
    "SourceLocation",
    "SourceUnavailableError",
    "SourceOpenError",
    "SourceDecodeError",
    "AssemblyWriteError",
    "LexError",
    # Front end
    "CLexer",
    "CToken",
    "CTokenType",
    "scan",
    "MiniCCompiler",
    "CompilerOptions",
    "Stage",
]
