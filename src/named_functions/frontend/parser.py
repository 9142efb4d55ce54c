"""
Token Tree Parser

Rust Pattern: <proc_macro2::TokenStream as FromStr>::from_str

Reads text into a token tree. Only delimiters must balance; nothing about
items or expressions is checked.
"""

from typing import Optional
from pathlib import Path
from lark import Lark
from lark.exceptions import UnexpectedInput
import logging

from ..shared import TokenStream, SourceLocation, TokenTreeParseError
from ..utils.config import DEFAULT_PARSER_CACHE_FILE, DEFAULT_SOURCE_FILE
from .transformers import TokenTreeTransformer

logger = logging.getLogger("named_functions.frontend.parser")


class Parser:
    """
    Token tree parser.

    Rust Pattern: TokenStream::from_str

    - Takes source text, returns a token tree
    - Every token keeps its source location
    - Unbalanced delimiters and unlexable characters raise TokenTreeParseError
    - Uses Lark (LALR) with its native grammar cache
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='stream',
            parser='lalr',
            cache=cache_file,
            maybe_placeholders=False,
        )
        self.transformer = TokenTreeTransformer()

    def parse(self, source: str, source_file: str = DEFAULT_SOURCE_FILE) -> TokenStream:
        """
        Parse source text to a token tree.

        Returns: list of tokens for the top level
        """
        try:
            self.transformer.current_file = source_file
            tree = self.parser.parse(source)
            tokens = self.transformer.transform(tree)
        except UnexpectedInput as e:
            location = None
            line = getattr(e, 'line', -1)
            column = getattr(e, 'column', -1)
            if line is not None and line > 0:
                location = SourceLocation(file=source_file, line=line, column=column)
            raise TokenTreeParseError(f"Parse error: {e}", source_file, location) from e

        logger.debug(f"Parsed {len(tokens)} top-level tokens from {source_file}")
        return tokens


_default_parser: Optional[Parser] = None


def parse_token_stream(source: str, source_file: str = DEFAULT_SOURCE_FILE) -> TokenStream:
    """Parse text with a shared module-level Parser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = Parser()
    return _default_parser.parse(source, source_file)
