"""
minicc Front End
================

Lexical analysis for a small subset of C, plus the driver that wires
the stages together.

Pipeline
--------
    C Source → Loader → Lexer → (Parser) → (Code Generator) → Assembly

The parser and code generator are placeholders; the AST module defines
the tree they will exchange.

Language Subset
---------------
- Keywords: int, void, return
- Identifiers and decimal constants
- Delimiters: ( ) { } ;
- Comments: // and /* */

Usage
-----
>>> from minicc.frontend import scan
>>> [t.type.name for t in scan("int main(void) { return 2; }")]
['INT', 'IDENTIFIER', 'LPAREN', 'VOID', 'RPAREN', 'LBRACE', 'RETURN', 'CONSTANT', 'SEMICOLON', 'RBRACE']
"""

from minicc.frontend.compiler import (
    MiniCCompiler,
    CompilerOptions,
    CompilerResult,
    Stage,
    assembly_path_for,
    is_c_source,
)
from minicc.frontend.errors import (
    LexError,
    MalformedNumberError,
    InvalidIdentifierError,
    UnsupportedOperatorError,
    InvalidCharacterError,
    UnterminatedCommentError,
)
from minicc.frontend.lexer import CLexer, CTokenType, CToken, scan
from minicc.frontend.loader import load_source
from minicc.frontend.ast import (
    ASTNode,
    ProgramNode,
    FunctionNode,
    ReturnStatement,
    ConstantExpression,
    ASTPrinter,
)

__all__ = [
    # Driver
    "MiniCCompiler",
    "CompilerOptions",
    "CompilerResult",
    "Stage",
    "assembly_path_for",
    "is_c_source",
    # Errors
    "LexError",
    "MalformedNumberError",
    "InvalidIdentifierError",
    "UnsupportedOperatorError",
    "InvalidCharacterError",
    "UnterminatedCommentError",
    # Lexer
    "CLexer",
    "CTokenType",
    "CToken",
    "scan",
    # Loader
    "load_source",
    # AST Nodes
    "ASTNode",
    "ProgramNode",
    "FunctionNode",
    "ReturnStatement",
    "ConstantExpression",
    "ASTPrinter",
]
