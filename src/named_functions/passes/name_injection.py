"""
Function Name Injection Pass

Rust Pattern: #[named_functions] attribute body rewrite

Walks a token tree and, for every `fn NAME ... { BODY }` it recognises,
prepends

    macro_rules! function_name { () => ("NAME") }

to BODY, so `function_name!()` anywhere inside the body expands to the
enclosing function's name. A nested function gets its own declaration, which
shadows the outer one inside the nested body only.

Header detection is a two-flag scan local to each nesting level, not a
parser: any tokens between the name and the body (generics, parameter lists,
return types, where clauses) pass through without disturbing it.
"""

import logging
from typing import List, Optional

from ..shared import (
    Delimiter, Ident, Literal, Group, TokenStream,
    SourceLocation, punct_sequence,
)
from ..utils.config import FUNCTION_KEYWORD, DECLARATION_KEYWORD, FUNCTION_NAME_MACRO

logger = logging.getLogger("named_functions.passes.name_injection")


def injected_declaration(name: str) -> Group:
    """
    Declaration bound at the top of a function body.

    Wrapped in an invisible group so it is a single token that prints as
    its plain contents.
    """
    rule = Group(Delimiter.BRACE, [
        Group(Delimiter.PARENTHESIS, []),
        *punct_sequence("=>"),
        Group(Delimiter.PARENTHESIS, [Literal.string(name)]),
    ])
    return Group(Delimiter.NONE, [
        Ident(DECLARATION_KEYWORD),
        *punct_sequence("!"),
        Ident(FUNCTION_NAME_MACRO),
        rule,
    ])


def rewrite(tree: TokenStream) -> TokenStream:
    """
    Rewrite a token tree, injecting a name declaration into every function body.

    Never fails and never mutates ``tree``; returns a new tree.
    """
    return _rewrite_level(tree, [])


def _rewrite_level(stream: TokenStream, injected: List[str]) -> TokenStream:
    output: TokenStream = []
    expecting_name = False
    name_ready = False
    current_name: Optional[str] = None

    for tt in stream:
        if isinstance(tt, Ident):
            if tt.text == FUNCTION_KEYWORD:
                expecting_name = True
            elif expecting_name:
                current_name = tt.text
                expecting_name = False
                name_ready = True
            output.append(tt)
        elif isinstance(tt, Group):
            inner = _rewrite_level(tt.stream, injected)
            if name_ready and tt.delimiter == Delimiter.BRACE:
                inner = [injected_declaration(current_name), *inner]
                injected.append(current_name)
                _log_injection(current_name, tt.span)
                name_ready = False
                expecting_name = False
            output.append(tt.with_stream(inner))
        else:
            output.append(tt)

    return output


def _log_injection(name: str, span: Optional[SourceLocation]) -> None:
    where = str(span) if span is not None else "<call site>"
    logger.debug(f"Injected {FUNCTION_NAME_MACRO}!() = {name!r} into body at {where}")


class NameInjectionPass:
    """
    Pass wrapper around :func:`rewrite`.

    Keeps the names it injected, in injection order (depth first, so an
    inner function is listed before the function that contains it), for
    callers that want to report what happened.
    """

    def __init__(self) -> None:
        self.injected_names: List[str] = []

    def run(self, tree: TokenStream) -> TokenStream:
        self.injected_names = []
        result = _rewrite_level(tree, self.injected_names)
        logger.debug(f"Name injection finished: {len(self.injected_names)} function bodies rewritten")
        return result
