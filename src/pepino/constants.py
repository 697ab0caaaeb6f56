"""Literals of the scenario file syntax.

Module-level constants shared by the line model and the matchers.
"""

import re

DEFAULT_DIALECT = "en"

COMMENT_PREFIX = "#"
TAG_PREFIX = "@"
TITLE_KEYWORD_SEPARATOR = ":"
TABLE_CELL_SEPARATOR = "|"

# Docstring fences; the primary literal is tried first when opening
DOCSTRING_SEPARATOR = '"""'
DOCSTRING_ALTERNATIVE_SEPARATOR = "```"
DOCSTRING_SEPARATORS: tuple[str, str] = (DOCSTRING_SEPARATOR, DOCSTRING_ALTERNATIVE_SEPARATOR)

# "# language: fr" with flexible whitespace
LANGUAGE_PATTERN = re.compile(r"^\s*#\s*language\s*:\s*([a-zA-Z\-_]+)\s*$")
