"""
Shared components: token trees, source locations and errors.
"""

from .source_location import SourceLocation
from .errors import NamedFunctionsError, InvalidConfiguration, TokenTreeParseError
from .tokens import (
    Delimiter, Spacing, Ident, Punct, Literal, Group,
    TokenTree, TokenStream, punct_sequence, count_tokens,
)
