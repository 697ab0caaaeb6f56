"""Serialize a token stream to JSON."""

from pepino import to_json, tokenize

tokens = tokenize("# language: es\nCaracterística: Búsqueda\n  | a | b |\n")
print(to_json(tokens, indent=2))
