"""
Token Tree Definitions

Rust Pattern: proc_macro2::{TokenTree, TokenStream}

A token tree is a plain Python list of tokens. Groups own their inner list;
there is no sharing and no cycles. Spans are carried along but never take
part in equality, so two trees compare equal when their structure and
spellings match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union

from .source_location import SourceLocation


class Delimiter(Enum):
    """Group delimiters (proc_macro::Delimiter)"""
    PARENTHESIS = "()"
    BRACE = "{}"
    BRACKET = "[]"
    NONE = ""

    @property
    def open(self) -> str:
        return self.value[:1]

    @property
    def close(self) -> str:
        return self.value[1:]


class Spacing(Enum):
    """Whether a punctuation character is glued to the next one"""
    ALONE = "alone"
    JOINT = "joint"


@dataclass(frozen=True)
class Ident:
    """Identifier, compared only by its spelling."""
    text: str
    span: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Punct:
    """Single punctuation character."""
    char: str
    spacing: Spacing = Spacing.ALONE
    span: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Punct must be a single character, got {self.char!r}")

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class Literal:
    """
    Literal token holding its exact source spelling.

    ``Literal("42u8")``, ``Literal('"text"')``, ``Literal("'c'")``. Use
    :meth:`string` to build a string literal from a Python value.
    """
    text: str
    span: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    @classmethod
    def string(cls, value: str, span: Optional[SourceLocation] = None) -> "Literal":
        """Escaped string literal (Literal::string)."""
        return cls('"' + _escape_string(value) + '"', span)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Group:
    """Delimited sub-sequence of tokens."""
    delimiter: Delimiter
    stream: List["TokenTree"] = field(default_factory=list)
    span: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def with_stream(self, stream: List["TokenTree"]) -> "Group":
        """New group with the same delimiter and span around ``stream``."""
        return Group(self.delimiter, stream, self.span)

    def __str__(self) -> str:
        from ..frontend.printer import render
        return render([self])


TokenTree = Union[Ident, Punct, Literal, Group]
TokenStream = List[TokenTree]


def _escape_string(value: str) -> str:
    out = []
    for ch in value:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\0":
            out.append("\\0")
        elif not ch.isprintable():
            out.append("\\u{%x}" % ord(ch))
        else:
            out.append(ch)
    return "".join(out)


def punct_sequence(chars: str, span: Optional[SourceLocation] = None) -> TokenStream:
    """
    Punctuation characters written back to back, e.g. ``"::"`` or ``"=>"``.

    Every character but the last is joint.
    """
    last = len(chars) - 1
    return [
        Punct(ch, Spacing.JOINT if i < last else Spacing.ALONE, span)
        for i, ch in enumerate(chars)
    ]


def count_tokens(stream: Iterable[TokenTree]) -> int:
    """Total number of tokens, groups included, at every depth."""
    total = 0
    for tt in stream:
        total += 1
        if isinstance(tt, Group):
            total += count_tokens(tt.stream)
    return total
