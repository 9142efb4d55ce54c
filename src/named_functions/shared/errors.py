"""
Error Types

Rust Pattern: proc_macro attribute errors surfaced through compile_error!
"""

from typing import Optional
from .source_location import SourceLocation


class NamedFunctionsError(Exception):
    """Base exception for all named_functions errors"""
    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"error: {self.message}\n --> {self.location}"
        return self.message


class InvalidConfiguration(NamedFunctionsError):
    """
    Attribute invoked with arguments.

    The attribute takes none. This error is handed back as a value by the
    entry point and becomes a compile_error! invocation in the output; it is
    never raised by the rewriter.
    """


class TokenTreeParseError(NamedFunctionsError):
    """Text could not be read as a token tree (unbalanced or unlexable)."""
    def __init__(self, message: str, source_file: str, location: Optional[SourceLocation] = None):
        super().__init__(message, location)
        self.source_file = source_file
