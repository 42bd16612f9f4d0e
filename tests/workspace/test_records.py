# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading documented command records."""

import json
from pathlib import Path

import pytest

from docsyntax.model.records import CommandRecord, Direction
from docsyntax.validation.checks import SyntaxChecker
from docsyntax.workspace import RecordsError, load_records

# ###############
# Helpers
# ###############


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Normal Cases
# ###############


def test_load_yaml_records(tmp_path: Path) -> None:
    """Records in YAML are validated into CommandRecord instances."""
    content = """\
Commands:
  WA Evaluate JavaScript:
    Syntax: "WA Evaluate JavaScript ( *object* : Integer ; *jsCode* : Text ) : any"
    Params:
      - [object, Integer, "&#8594;", Form object]
      - [jsCode, Text, "&#8594;", JavaScript code]
      - [Result, any, "&#8592;", Result of evaluation]
"""
    records = load_records(_write(tmp_path, "records.yaml", content))

    record = records["Commands"]["WA Evaluate JavaScript"]
    assert isinstance(record, CommandRecord)
    assert record.syntax is not None and record.syntax.startswith("WA Evaluate JavaScript")
    assert [p.name for p in record.params] == ["object", "jsCode", "Result"]
    assert record.params[2].flow == Direction.OUTPUT


def test_load_json_records(tmp_path: Path) -> None:
    """JSON files are read with the same loader."""
    data = {
        "Classes": {
            "File.copyTo": {
                "Syntax": ".copyTo( *destinationFolder* : 4D.Folder ) : 4D.File",
                "Params": [
                    {"name": "destinationFolder", "type": "4D.Folder", "direction": "->", "description": ""},
                    {"name": "Result", "type": "4D.File", "direction": "<-"},
                ],
            },
            "File.name": {},
        }
    }
    records = load_records(_write(tmp_path, "records.json", json.dumps(data)))

    assert records["Classes"]["File.copyTo"].params[1].type == "4D.File"
    assert records["Classes"]["File.name"].syntax is None


def test_empty_file_has_no_records(tmp_path: Path) -> None:
    """An empty file yields no records."""
    assert load_records(_write(tmp_path, "records.yaml", "")) == {}


def test_null_params_load_as_empty_table(tmp_path: Path) -> None:
    """A command with `Params: null` loads and does not block its siblings."""
    content = """\
Commands:
  Undocumented:
    Syntax: "Undocumented ( *a* : Text )"
    Params:
  Broken:
    Syntax: "Broken ( *a* : Text"
    Params:
      - [a, Text, "->", ""]
"""
    records = load_records(_write(tmp_path, "records.yaml", content))

    assert records["Commands"]["Undocumented"].params == []
    reports = SyntaxChecker().check_records(records)
    assert [report.name for report in reports] == ["Commands.Undocumented", "Commands.Broken"]
    assert not reports[0].has_issues
    assert reports[1].has_issues


def test_null_cells_read_as_empty_strings(tmp_path: Path) -> None:
    """Null cells in a parameter row do not turn into the text 'None'."""
    data = {
        "Commands": {
            "cmd": {
                "Syntax": "cmd ( *a* : Text ; *b* : Text )",
                "Params": [["a", "Text", "->", None], ["b", None, "->", ""], {"name": "c", "type": None}],
            }
        }
    }
    records = load_records(_write(tmp_path, "records.json", json.dumps(data)))

    params = records["Commands"]["cmd"].params
    assert params[0].description == ""
    assert params[1].type == ""
    assert params[2].type == ""
    report = SyntaxChecker().check_command("cmd", records["Commands"]["cmd"])
    assert report is not None
    assert report.variants[0].validation is not None
    assert report.variants[0].validation.type_mismatches == []


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(RecordsError, match="Cannot read"):
        load_records(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(RecordsError, match="Invalid YAML"):
        load_records(_write(tmp_path, "records.yaml", "Commands: {cmd: [\n"))


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "Commands: not-a-mapping\n",
        "Commands:\n  cmd:\n    Syntax: [1, 2]\n",
    ],
)
def test_schema_violations_raise(tmp_path: Path, content: str) -> None:
    with pytest.raises(RecordsError, match="Invalid records file"):
        load_records(_write(tmp_path, "records.yaml", content))
