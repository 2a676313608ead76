"""
Lexical Error Hierarchy
=======================

Exceptions raised by the scanner. All of them are terminal: the first
malformed construct stops the scan and no partial token list is returned.

Exception Hierarchy
-------------------
LexError (base for all scanner errors)
├── MalformedNumberError - digit run followed by an identifier character
├── InvalidIdentifierError - lone underscore or illegal identifier text
├── UnsupportedOperatorError - '/' that does not start a comment
├── InvalidCharacterError - character outside the language subset
└── UnterminatedCommentError - end of input inside a block comment

Example:
    main.c:1:12: error: invalid character '@' (0x40)
        int main(@void) { return 2; }
                   ^
"""

from typing import Optional

from minicc.errors import CompilerError, SourceLocation


class LexError(CompilerError):
    """
    Base class for scanner errors.

    Raised when the source text cannot be split into tokens of the
    supported vocabulary.
    """
    pass


class MalformedNumberError(LexError):
    """
    Numeric constant immediately followed by a letter or underscore.

    Example:
        return 123abc;
    """

    def __init__(
        self,
        digits: str,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.digits = digits
        self.char = char
        super().__init__(
            f"malformed numeric constant '{digits}{char}'",
            location=location,
            hint="identifiers cannot start with a digit",
            source_line=source_line,
        )


class InvalidIdentifierError(LexError):
    """
    Identifier text that is not legal on its own.

    A lone underscore is rejected, as is any text outside [A-Za-z0-9_].
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        if text == "_":
            message = "standalone underscore '_' is not a valid identifier"
        else:
            message = f"invalid identifier '{text}'"
        super().__init__(message, location=location, source_line=source_line)


class UnsupportedOperatorError(LexError):
    """A '/' that begins neither '//' nor '/*'."""

    def __init__(
        self,
        operator: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.operator = operator
        super().__init__(
            f"unsupported operator '{operator}'",
            location=location,
            hint="operators are not supported yet; only '//' and '/* */' comments may use '/'",
            source_line=source_line,
        )


class InvalidCharacterError(LexError):
    """
    Invalid character in source code.

    Raised when the scanner meets a character that no classification
    rule accepts.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


class UnterminatedCommentError(LexError):
    """End of input reached before the closing '*/' of a block comment."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated block comment",
            location=location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )
