"""
minicc Error Hierarchy
======================

This module defines the root of the exception hierarchy for minicc.
All exceptions inherit from MiniCError, allowing callers to catch every
compiler-related error with a single except clause.

Exception Hierarchy
-------------------
MiniCError (base)
├── CompilerError - located diagnostics (file:line:column)
│   └── LexError - scanner failures (see minicc.frontend.errors)
├── SourceUnavailableError - source text could not be obtained
│   ├── SourceOpenError - path cannot be opened or read
│   └── SourceDecodeError - bytes cannot be decoded
└── AssemblyWriteError - assembly artifact could not be created

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCError(Exception):
    """
    Base exception for all minicc errors.

        try:
            tokens = scan(source)
        except MiniCError as e:
            print(e)
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Located Diagnostics
# =============================================================================

class CompilerError(MiniCError):
    """
    Base exception for diagnostics tied to a position in the source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.c:1:5: error: invalid character '@'
                int @x;
                    ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Loading Exceptions
# =============================================================================

class SourceUnavailableError(MiniCError):
    """
    Source text could not be obtained for a path.

    The scanner never raises this; it is surfaced by the loader before
    scanning starts. Callers that do not care why the text is missing
    can catch this class alone.

    Attributes:
        path: The path that was requested
        reason: Short description of the underlying failure
        detail: Operating system message, appended when known
    """

    def __init__(self, path: str, reason: str, detail: Optional[str] = None):
        self.path = path
        self.reason = reason
        self.detail = detail
        message = f"error: {reason} '{path}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class SourceOpenError(SourceUnavailableError):
    """The source path could not be opened or read."""

    def __init__(self, path: str, detail: Optional[str] = None):
        super().__init__(path, "could not open file", detail)


class SourceDecodeError(SourceUnavailableError):
    """The source bytes are not valid text in the requested encoding."""

    def __init__(self, path: str, encoding: str):
        self.encoding = encoding
        super().__init__(path, f"could not decode {encoding} text in")


# =============================================================================
# Output Exceptions
# =============================================================================

class AssemblyWriteError(MiniCError):
    """The assembly output file could not be created."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"error: failed to create assembly file '{path}'")
