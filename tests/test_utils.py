"""
Test utilities for the named_functions test suite.

Helpers for locating groups and injected declarations in rewritten trees.
"""

import sys
from pathlib import Path
from typing import Iterator, List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from named_functions.shared import Delimiter, Ident, Literal, Group, TokenStream, TokenTree
from named_functions.utils.config import DECLARATION_KEYWORD, FUNCTION_NAME_MACRO


def is_declaration(tt: TokenTree) -> bool:
    """True if ``tt`` is an injected function_name declaration."""
    return (
        isinstance(tt, Group)
        and tt.delimiter == Delimiter.NONE
        and len(tt.stream) == 4
        and tt.stream[0] == Ident(DECLARATION_KEYWORD)
        and tt.stream[2] == Ident(FUNCTION_NAME_MACRO)
    )


def declared_name(tt: TokenTree) -> str:
    """Function name bound by an injected declaration."""
    assert is_declaration(tt), f"not an injected declaration: {tt!r}"
    rule = tt.stream[3]
    value = rule.stream[-1]
    literal = value.stream[0]
    assert isinstance(literal, Literal)
    return literal.text[1:-1]


def iter_groups(stream: TokenStream) -> Iterator[Group]:
    """All groups at every depth, pre-order."""
    for tt in stream:
        if isinstance(tt, Group):
            yield tt
            yield from iter_groups(tt.stream)


def count_declarations(stream: TokenStream) -> int:
    return sum(1 for group in iter_groups(stream) if is_declaration(group))


def strip_declarations(stream: TokenStream) -> TokenStream:
    """Remove every injected declaration, recursively."""
    out: TokenStream = []
    for tt in stream:
        if is_declaration(tt):
            continue
        if isinstance(tt, Group):
            out.append(tt.with_stream(strip_declarations(tt.stream)))
        else:
            out.append(tt)
    return out


def body_after(stream: TokenStream, name: str) -> Optional[Group]:
    """
    First brace group following the identifier ``name`` at this level.

    Searches nested levels when the identifier is not at the top.
    """
    seen = False
    for tt in stream:
        if isinstance(tt, Ident) and tt.text == name:
            seen = True
        elif seen and isinstance(tt, Group) and tt.delimiter == Delimiter.BRACE:
            return tt
    for group in (tt for tt in stream if isinstance(tt, Group)):
        found = body_after(group.stream, name)
        if found is not None:
            return found
    return None


def idents(stream: TokenStream) -> List[str]:
    """Spellings of the identifiers at the top level of ``stream``."""
    return [tt.text for tt in stream if isinstance(tt, Ident)]
