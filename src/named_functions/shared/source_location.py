"""
Source Location (Span)

Rust Pattern: proc_macro::Span
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a token or group (Rust Span pattern).

    Rust Pattern: proc_macro::Span

    Tokens read from text get the location of their first character; groups
    get a location running from the opening delimiter to the closing one.
    Synthesized tokens carry no location at all (``None``), which plays the
    role of ``Span::call_site()``.

    Immutable (frozen) so a location can be shared by the input token and
    its rewritten replacement.
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    def join(self, other: "SourceLocation") -> "SourceLocation":
        """Span covering ``self`` through ``other`` (Span::join)."""
        return SourceLocation(
            file=self.file,
            line=self.line,
            column=self.column,
            start=self.start,
            end=other.end,
            end_line=other.end_line,
            end_column=other.end_column,
        )

    def __str__(self) -> str:
        """Format as file:line:column (Rust pattern)"""
        return f"{self.file}:{self.line}:{self.column}"
