"""One lexer per document, 1000 documents lexed in parallel."""

from concurrent.futures import ThreadPoolExecutor

from pepino import tokenize

docs = [f"Feature: Doc {i}\n  Scenario: s\n    Given step {i}\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, docs))

print(f"Lexed {len(results)} documents in parallel")
print("Last step text:", results[-1][2].text)
