"""
Token Tree Printer

Rust Pattern: impl Display for proc_macro2::TokenStream

Tokens are separated by a single space except after a joint punctuation
character. Brace groups pad their contents with spaces; invisible groups
print their contents only.
"""

from typing import Iterable, List

from ..shared import Delimiter, Spacing, Punct, Group, TokenTree


def render(stream: Iterable[TokenTree]) -> str:
    """Render a token tree back to text."""
    parts: List[str] = []
    _render_into(stream, parts)
    return "".join(parts)


def _render_into(stream: Iterable[TokenTree], parts: List[str]) -> None:
    joint = False
    for index, tt in enumerate(stream):
        if index != 0 and not joint:
            parts.append(" ")
        joint = False
        if isinstance(tt, Group):
            _render_group(tt, parts)
        elif isinstance(tt, Punct):
            joint = tt.spacing == Spacing.JOINT
            parts.append(tt.char)
        else:
            parts.append(tt.text)


def _render_group(group: Group, parts: List[str]) -> None:
    if group.delimiter == Delimiter.BRACE:
        parts.append("{ ")
    else:
        parts.append(group.delimiter.open)
    _render_into(group.stream, parts)
    if group.delimiter == Delimiter.BRACE and group.stream:
        parts.append(" ")
    parts.append(group.delimiter.close)
