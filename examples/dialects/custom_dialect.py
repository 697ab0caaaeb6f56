"""Add a language to the built-in dialects and report unknown ones."""

from pepino import Dialect, LexConfig, Lexer, create_registry_with_builtins

builder = create_registry_with_builtins()
builder.register(
    Dialect.from_dict(
        "en-story",
        {
            "feature": ["Story"],
            "background": ["Setting"],
            "scenario": ["Chapter"],
            "scenarioOutline": ["Chapter Template"],
            "examples": ["Variations"],
            "given": ["* ", "Once upon a time "],
            "when": ["* ", "Suddenly "],
            "then": ["* ", "Finally "],
            "and": ["* ", "And "],
            "but": ["* ", "But "],
        },
    )
)
config = LexConfig(dialect_provider=builder.build())

lexer = Lexer(
    "# language: en-story\nStory: The login\n  Chapter: One\n    Suddenly a user appears\n",
    config=config,
)
for token in lexer.tokenize():
    print(token.type.value, token.keyword, token.text)

lexer = Lexer("# language: tlh\nFeature: still English\n", config=config)
tokens = list(lexer.tokenize())
for error in lexer.errors:
    print("diagnostic:", error)
