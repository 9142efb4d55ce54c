"""
Attribute Driver

Rust Pattern: #[proc_macro_attribute] entry point

Validates the attribute arguments, runs the name injection pass over the
annotated item, and turns a rejected invocation into a compile_error!
invocation that the host reports as an ordinary diagnostic.
"""

import logging
from typing import Optional

from ..shared import (
    Delimiter, Ident, Literal, Group, TokenStream,
    InvalidConfiguration, punct_sequence,
)
from ..passes.name_injection import NameInjectionPass
from ..frontend.parser import Parser
from ..frontend.printer import render
from ..utils.base import Result
from ..utils.config import (
    DIAGNOSTIC_CRATE, DIAGNOSTIC_MACRO, UNEXPECTED_ARGUMENTS_MESSAGE, DEFAULT_SOURCE_FILE,
)

logger = logging.getLogger("named_functions.compiler.driver")


def compile_error_tokens(message: str) -> TokenStream:
    """``::core::compile_error! { "message" }`` as a token tree."""
    return [
        *punct_sequence("::"),
        Ident(DIAGNOSTIC_CRATE),
        *punct_sequence("::"),
        Ident(DIAGNOSTIC_MACRO),
        *punct_sequence("!"),
        Group(Delimiter.BRACE, [Literal.string(message)]),
    ]


def named_impl(
    params: TokenStream,
    item: TokenStream,
    injection: Optional[NameInjectionPass] = None,
) -> Result[TokenStream, InvalidConfiguration]:
    """
    Validate ``params`` and rewrite ``item``.

    Any attribute argument at all is rejected before rewriting starts.
    Pass ``injection`` to inspect which names were injected.
    """
    if params:
        logger.debug(f"Rejecting {len(params)} attribute argument token(s)")
        return Result.err(InvalidConfiguration(UNEXPECTED_ARGUMENTS_MESSAGE, params[0].span))
    injection = injection or NameInjectionPass()
    return Result.ok(injection.run(item))


def named_functions(params: TokenStream, item: TokenStream) -> TokenStream:
    """
    Attribute entry point.

    Returns the rewritten item, or the diagnostic construct when arguments
    were given. Never raises for bad arguments.
    """
    return named_impl(params, item).unwrap_or_else(lambda err: compile_error_tokens(err.message))


class ExpansionResult:
    """Expansion result"""
    def __init__(
        self,
        tokens: TokenStream,
        error: Optional[InvalidConfiguration] = None,
        injected_names: Optional[list] = None,
    ):
        self.tokens = tokens
        self.error = error
        self.injected_names = injected_names or []

    @property
    def success(self) -> bool:
        return self.error is None

    def render(self) -> str:
        return render(self.tokens)


class MacroDriver:
    """
    Text-level driver.

    Reads attribute arguments and item from source text, expands them, and
    reports the outcome. The parser is built once and reused across calls.
    """

    def __init__(self, parser: Optional[Parser] = None):
        self.parser = parser or Parser()

    def expand(self, params: TokenStream, item: TokenStream) -> ExpansionResult:
        injection = NameInjectionPass()
        result = named_impl(params, item, injection)
        if result.is_err():
            err = result.unwrap_err()
            return ExpansionResult(compile_error_tokens(err.message), error=err)
        return ExpansionResult(result.unwrap(), injected_names=injection.injected_names)

    def expand_source(
        self,
        params_source: str,
        item_source: str,
        source_file: str = DEFAULT_SOURCE_FILE,
    ) -> ExpansionResult:
        """
        Parse both texts and expand.

        Raises TokenTreeParseError if either text has unbalanced delimiters.
        """
        params = self.parser.parse(params_source, source_file)
        item = self.parser.parse(item_source, source_file)
        return self.expand(params, item)
