"""
minicc Lexer (Scanner)
======================

This module implements the lexer for the minicc subset of C.
It converts source text into a list of tokens for the parser.

Token Categories
----------------
- Keywords: int, void, return
- Identifiers: function and variable names
- Constants: decimal digit runs, kept as text
- Delimiters: (, ), {, }, ;

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Anything else, including every C operator, is rejected. The first
malformed construct raises a LexError and no tokens are returned.

Example Usage
-------------
>>> from minicc.frontend.lexer import scan
>>> for token in scan('int main(void) { return 2; }', "test.c"):
...     print(token)
Token(INT, 'int', 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(LPAREN, '(', 1:9)
Token(VOID, 'void', 1:10)
Token(RPAREN, ')', 1:14)
Token(LBRACE, '{', 1:16)
Token(RETURN, 'return', 1:18)
Token(CONSTANT, '2', 1:25)
Token(SEMICOLON, ';', 1:26)
Token(RBRACE, '}', 1:28)
"""

import logging
import string
from dataclasses import dataclass, field
from enum import Enum, auto

from minicc.errors import SourceLocation
from minicc.frontend.errors import (
    InvalidCharacterError,
    InvalidIdentifierError,
    MalformedNumberError,
    UnsupportedOperatorError,
    UnterminatedCommentError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class CTokenType(Enum):
    """
    Token types for the minicc language.

    Keywords are distinguished from identifiers so the parser can
    match on kinds rather than on text.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # Function/variable names
    CONSTANT = auto()       # Decimal integer constants

    # === Keywords ===
    INT = auto()            # int
    VOID = auto()           # void
    RETURN = auto()         # return

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    SEMICOLON = auto()      # ;


# =============================================================================
# Keyword and Delimiter Tables
# =============================================================================

KEYWORDS: dict[str, CTokenType] = {
    "int": CTokenType.INT,
    "void": CTokenType.VOID,
    "return": CTokenType.RETURN,
}

DELIMITERS: dict[str, CTokenType] = {
    "(": CTokenType.LPAREN,
    ")": CTokenType.RPAREN,
    "{": CTokenType.LBRACE,
    "}": CTokenType.RBRACE,
    ";": CTokenType.SEMICOLON,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class CToken:
    """
    A single token from C source code.

    The value is always the exact lexeme, so joining token values with
    spaces reproduces equivalent source. Position fields are excluded
    from equality: two tokens of the same kind and text compare equal
    wherever they appear.

    Attributes:
        type: The CTokenType classification
        value: The lexeme text
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    type: CTokenType
    value: str
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in (CTokenType.INT, CTokenType.VOID, CTokenType.RETURN)


# =============================================================================
# Lexer Implementation
# =============================================================================

class CLexer:
    """
    Tokenizes minicc source code.

    The scanner walks an explicit cursor over the source, deciding each
    token from the next character plus at most one character of
    lookahead. Identifiers, constants and comments are matched greedily;
    keywords are looked up only after the whole identifier is consumed.

    Usage:
        lexer = CLexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        allow_unterminated_comments: Accept a block comment that runs to
            end of input instead of raising UnterminatedCommentError
    """

    IDENT_START = string.ascii_letters + "_"
    IDENT_CHARS = string.ascii_letters + string.digits + "_"
    WHITESPACE = " \t\n"

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        allow_unterminated_comments: bool = False,
    ):
        self.source = source
        self.filename = filename
        self.allow_unterminated_comments = allow_unterminated_comments

        self._pos = 0
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

    def tokenize(self) -> list[CToken]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order

        Raises:
            LexError: On the first malformed construct
        """
        tokens: list[CToken] = []

        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            start_line = self._line
            start_column = self._column

            if char in DELIMITERS:
                self._advance()
                tokens.append(self._make_token(DELIMITERS[char], char, start_line, start_column))
            elif char in string.digits:
                tokens.append(self._scan_number(start_line, start_column))
            elif char in self.IDENT_START:
                tokens.append(self._scan_identifier(start_line, start_column))
            elif char == "/":
                self._scan_comment(start_line, start_column)
            else:
                raise InvalidCharacterError(
                    char,
                    self._location(start_line, start_column),
                    self._get_current_line(),
                )

        logger.debug(f"Scanned {len(tokens)} tokens from {self.filename}")
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Look at the current character. Returns '' at end of source."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line/column."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _make_token(
        self,
        token_type: CTokenType,
        value: str,
        start_line: int,
        start_column: int,
    ) -> CToken:
        return CToken(
            type=token_type,
            value=value,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.filename, line, column)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_number(self, start_line: int, start_column: int) -> CToken:
        """
        Scan a decimal constant.

        A constant running straight into a letter or underscore (123abc)
        is rejected rather than split into two tokens.
        """
        chars = []
        while self._peek() and self._peek() in string.digits:
            chars.append(self._advance())

        digits = "".join(chars)
        following = self._peek()
        if following and following in self.IDENT_START:
            raise MalformedNumberError(
                digits,
                following,
                self._location(start_line, start_column),
                self._get_current_line(),
            )

        return self._make_token(CTokenType.CONSTANT, digits, start_line, start_column)

    def _scan_identifier(self, start_line: int, start_column: int) -> CToken:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter or underscore and continue with
        letters, digits and underscores. The keyword table is consulted
        only once the full word has been read, so 'integer' stays an
        identifier.
        """
        chars = []
        while self._peek() and self._peek() in self.IDENT_CHARS:
            chars.append(self._advance())

        name = "".join(chars)
        location = self._location(start_line, start_column)

        if not name or name == "_":
            raise InvalidIdentifierError(name, location, self._get_current_line())

        # Unreachable through the loop above
        if any(ch not in self.IDENT_CHARS for ch in name):
            raise InvalidIdentifierError(name, location, self._get_current_line())

        if name in KEYWORDS:
            logger.debug(f"Found keyword '{name}' at {location}")
            return self._make_token(KEYWORDS[name], name, start_line, start_column)

        logger.debug(f"Found identifier '{name}' at {location}")
        return self._make_token(CTokenType.IDENTIFIER, name, start_line, start_column)

    def _scan_comment(self, start_line: int, start_column: int) -> None:
        """
        Skip a comment introduced by '/'.

        '//' runs to the end of the line, '/*' runs to the first '*/'.
        Any other '/' is an operator, none of which are supported.
        """
        self._advance()  # consume /
        next_char = self._peek()

        if next_char == "/":
            while self._peek() and self._peek() != "\n":
                self._advance()
            logger.debug(f"Skipped line comment at {self._location(start_line, start_column)}")
            return

        if next_char == "*":
            self._skip_block_comment(start_line, start_column)
            return

        raise UnsupportedOperatorError(
            "/",
            self._location(start_line, start_column),
            self._get_current_line(),
        )

    def _skip_block_comment(self, start_line: int, start_column: int) -> None:
        """
        Skip the body of a block comment after its opening '/'.

        Raises:
            UnterminatedCommentError: If input ends before '*/' and
                unterminated comments are not allowed
        """
        opening_line = self._get_current_line()
        self._advance()  # consume *

        while not self._at_end():
            if self._advance() == "*" and self._peek() == "/":
                self._advance()  # consume /
                logger.debug(f"Skipped block comment at {self._location(start_line, start_column)}")
                return

        if self.allow_unterminated_comments:
            logger.debug(
                f"Block comment at {self._location(start_line, start_column)} "
                f"runs to end of input"
            )
            return

        raise UnterminatedCommentError(
            self._location(start_line, start_column),
            opening_line,
        )

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(
    source: str,
    filename: str = "<input>",
    allow_unterminated_comments: bool = False,
) -> list[CToken]:
    """
    Tokenize source text in one call.

    Args:
        source: The C source code
        filename: Source filename for error messages
        allow_unterminated_comments: Accept a block comment left open at
            end of input

    Returns:
        Tokens in source order

    Raises:
        LexError: On the first malformed construct
    """
    lexer = CLexer(source, filename, allow_unterminated_comments)
    return lexer.tokenize()
