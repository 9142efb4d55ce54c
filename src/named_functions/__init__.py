"""
named_functions: inject each function's own name into its body.

    from named_functions import parse_token_stream, named_functions, render

    item = parse_token_stream('fn greet() { println!("{}", function_name!()); }')
    print(render(named_functions([], item)))
"""

from .shared import (
    Delimiter, Spacing, Ident, Punct, Literal, Group, TokenTree, TokenStream,
    SourceLocation, NamedFunctionsError, InvalidConfiguration, TokenTreeParseError,
)
from .frontend import Parser, parse_token_stream, render
from .passes import NameInjectionPass, rewrite, injected_declaration
from .compiler import named_functions, named_impl, compile_error_tokens, MacroDriver, ExpansionResult

__version__ = "0.1.0"
