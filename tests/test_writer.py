"""Tests for JSON output."""

import json
import logging
from pathlib import Path

import pytest

from csv_nest.errors import CsvNestError
from csv_nest.values import VDict, VList, VText
from csv_nest.writer import output_path, to_json, write_json

DOCS = [
    VDict({"a": VDict({"b": VList([VText("1"), VText("3")]), "c": VText("2")})}),
    VDict({"a": VText("山田")}),
]


class TestToJson:
    def test_pretty(self):
        text = to_json(DOCS)
        assert json.loads(text) == [{"a": {"b": ["1", "3"], "c": "2"}}, {"a": "山田"}]
        assert "\n  {" in text

    def test_compact(self):
        text = to_json(DOCS, pretty=False)
        assert "\n" not in text
        assert "山田" in text

    def test_empty(self):
        assert to_json([]) == "[]"


def test_output_path():
    assert output_path("out", "data/people.csv") == Path("out") / "people.json"

def test_output_path_without_stem():
    with pytest.raises(CsvNestError):
        output_path("out", "")

def test_write_json(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="csv_nest.writer"):
        path = write_json(tmp_path, "in/people.csv", "[]")
    assert path == tmp_path / "people.json"
    assert path.read_text(encoding="utf-8") == "[]\n"
    assert "Writing to" in caplog.text

def test_write_json_missing_dir(tmp_path):
    with pytest.raises(CsvNestError, match="Could not write"):
        write_json(tmp_path / "missing", "people.csv", "[]")
