"""Token serialization to JSON-compatible dicts.

Useful for caching lexer output, for sending it to tools outside Python
and for debugging. Output is deterministic (sorted keys).

Example:
    from pepino import tokenize
    from pepino.serialization import to_json

    json_str = to_json(tokenize("Feature: Login"))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from pepino.location import SourceLocation
from pepino.tokens import LineSpan, Token


def location_to_dict(location: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {"line": location.lineno, "column": location.col_offset}
    if location.source_file:
        result["source_file"] = location.source_file
    return result


def span_to_dict(span: LineSpan) -> dict[str, Any]:
    return {"column": span.column, "text": span.text}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Optional fields that are unset (keyword, text, items) are omitted.

    Args:
        token: Any Pepino token.

    Returns:
        Dict with ``type``, ``location`` and ``dialect`` plus set payloads.

    """
    result: dict[str, Any] = {
        "type": token.type.value,
        "location": location_to_dict(token.location),
        "dialect": token.dialect,
    }
    if token.keyword is not None:
        result["keyword"] = token.keyword
    if token.text is not None:
        result["text"] = token.text
    if token.items:
        result["items"] = [span_to_dict(span) for span in token.items]
    return result


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array string.

    Args:
        tokens: Tokens in stream order.
        indent: JSON indentation (None for compact output).

    """
    return json.dumps(
        [to_dict(token) for token in tokens],
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
