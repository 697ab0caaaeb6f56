"""One-line text form of tokens, for golden-file comparison.

Each token renders as::

    (line:col)Type:Keyword/Text/col:item,col:item

and the EOF token as plain ``EOF``. Missing keyword, text or items render
as empty fields.

Example:
    >>> from pepino import tokenize
    >>> print(format_tokens(tokenize("@a @b\\nFeature: Login\\n")))
    (1:1)TagLine://1:@a,4:@b
    (2:1)FeatureLine:Feature/Login/
    EOF

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable

from pepino.tokens import Token, TokenType


def format_token(token: Token) -> str:
    """Render one token in its text form."""
    if token.type is TokenType.EOF:
        return "EOF"
    items = ",".join(f"{span.column}:{span.text}" for span in token.items)
    loc = token.location
    return (
        f"({loc.lineno}:{loc.col_offset}){token.type.value}:"
        f"{token.keyword or ''}/{token.text or ''}/{items}"
    )


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token stream, one token per line."""
    return "\n".join(format_token(token) for token in tokens)
