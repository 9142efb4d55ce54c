"""
Token Tree Transformer
Converts the Lark parse tree of a token stream into token tree nodes
"""

from typing import List, Union
import logging

from lark import Transformer
from lark.lexer import Token

from ..shared import (
    Delimiter, Spacing, Ident, Punct, Literal, Group,
    TokenStream, SourceLocation,
)
from ..utils.config import DEFAULT_SOURCE_FILE

logger: logging.Logger = logging.getLogger(__name__)

_DELIMITERS = {
    "LPAR": Delimiter.PARENTHESIS,
    "LSQB": Delimiter.BRACKET,
    "LBRACE": Delimiter.BRACE,
}

_LITERAL_TYPES = frozenset({"STRING", "RAW_STRING", "CHAR", "NUMBER"})


class TokenTreeTransformer(Transformer):
    """
    Token tree transformer.

    Terminals are kept as Lark tokens until their enclosing level is
    complete, since punctuation spacing depends on the token that follows.
    """

    def __init__(self) -> None:
        super().__init__()
        self.current_file: str = DEFAULT_SOURCE_FILE

    def stream(self, children: List[Union[Token, Group]]) -> TokenStream:
        tokens = self._convert_level(children)
        logger.debug(f"Converted {len(tokens)} top-level tokens from {self.current_file}")
        return tokens

    def group(self, children: List[Union[Token, Group]]) -> Group:
        open_tok, *inner, close_tok = children
        span = self._extract_location(open_tok).join(self._extract_location(close_tok))
        return Group(_DELIMITERS[open_tok.type], self._convert_level(inner), span)

    def _extract_location(self, token: Token) -> SourceLocation:
        return SourceLocation(
            file=self.current_file,
            line=token.line,
            column=token.column,
            start=token.start_pos,
            end=token.end_pos,
            end_line=token.end_line,
            end_column=token.end_column,
        )

    def _convert_level(self, children: List[Union[Token, Group]]) -> TokenStream:
        out: TokenStream = []
        for index, item in enumerate(children):
            if isinstance(item, Group):
                out.append(item)
                continue
            span = self._extract_location(item)
            if item.type in ("IDENT", "RAW_IDENT"):
                out.append(Ident(item.value, span))
            elif item.type == "LIFETIME":
                # 'a is a joint quote followed by an identifier
                name_span = SourceLocation(
                    file=span.file,
                    line=span.line,
                    column=span.column + 1,
                    start=span.start + 1,
                    end=span.end,
                    end_line=span.end_line,
                    end_column=span.end_column,
                )
                out.append(Punct("'", Spacing.JOINT, span))
                out.append(Ident(item.value[1:], name_span))
            elif item.type == "PUNCT":
                following = children[index + 1] if index + 1 < len(children) else None
                out.append(Punct(item.value, self._spacing(item, following), span))
            elif item.type in _LITERAL_TYPES:
                out.append(Literal(item.value, span))
            else:
                raise ValueError(f"Unexpected terminal {item.type} in token stream")
        return out

    @staticmethod
    def _spacing(token: Token, following) -> Spacing:
        if (
            isinstance(following, Token)
            and following.type in ("PUNCT", "LIFETIME")
            and following.start_pos == token.end_pos
        ):
            return Spacing.JOINT
        return Spacing.ALONE
