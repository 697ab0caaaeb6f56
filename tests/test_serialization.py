"""Tests for token serialization."""

import json

from pepino import to_dict, to_json, tokenize


class TestToDict:
    """Dict form of tokens."""

    def test_step_line(self) -> None:
        token = tokenize("  Given x")[0]
        assert to_dict(token) == {
            "type": "StepLine",
            "location": {"line": 1, "column": 3},
            "dialect": "en",
            "keyword": "Given ",
            "text": "x",
        }

    def test_items(self) -> None:
        data = to_dict(tokenize("| a |")[0])
        assert data["items"] == [{"column": 3, "text": "a"}]
        assert "keyword" not in data
        assert "text" not in data

    def test_source_file(self) -> None:
        data = to_dict(tokenize("x", source_file="f.feature")[0])
        assert data["location"]["source_file"] == "f.feature"


class TestToJson:
    """JSON form of token streams."""

    def test_deterministic(self) -> None:
        tokens = tokenize("@t\nFeature: ñ\n")
        assert to_json(tokens) == to_json(tokenize("@t\nFeature: ñ\n"))

    def test_parses_back_to_dicts(self) -> None:
        tokens = tokenize("@t\nFeature: ñ\n")
        assert json.loads(to_json(tokens, indent=2)) == [to_dict(t) for t in tokens]

    def test_non_ascii_kept(self) -> None:
        assert "ñ" in to_json(tokenize("Feature: ñ"))
