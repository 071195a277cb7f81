"""
Unit Tests for Command Line Interface
=====================================
"""

import json

import pytest

from compat_table.cli import build_parser, main
from compat_table.core.rendering.table_generator import MISSING_BASE_PATH_MESSAGE


@pytest.fixture
def feature_file(tmp_path, fetch_feature_document):
    path = tmp_path / "fetch.json"
    path.write_text(json.dumps(fetch_feature_document), encoding="utf-8")
    return path


@pytest.fixture
def aggregate_file(tmp_path, aggregate_document):
    path = tmp_path / "headers.json"
    path.write_text(json.dumps(aggregate_document), encoding="utf-8")
    return path


class TestCLI:
    """Test the compat-table command."""

    def test_parser_arguments(self):
        args = build_parser().parse_args(["data.json", "--base-url", "docs/Web/API", "--locale", "fr"])

        assert str(args.path) == "data.json"
        assert args.base_url == "docs/Web/API"
        assert args.locale == "fr"
        assert args.output is None

    def test_feature_table_to_stdout(self, feature_file, capsys):
        assert main([str(feature_file)]) == 0

        out = capsys.readouterr().out
        assert out.startswith('<table class="compat-table">')
        assert '<p id="compatNote_1">1. ' in out

    def test_aggregate_table_with_locale(self, aggregate_file, capsys):
        assert main([str(aggregate_file), "--base-url", "docs/Web/API", "--locale", "fr"]) == 0

        out = capsys.readouterr().out
        assert '<a href="/fr/docs/Web/API/Headers/append">' in out

    def test_output_file(self, feature_file, tmp_path, capsys):
        output = tmp_path / "table.html"

        assert main([str(feature_file), "--output", str(output)]) == 0

        assert output.read_text(encoding="utf-8").startswith('<table class="compat-table">')
        assert capsys.readouterr().out == ""

    def test_missing_base_path_exits_with_error(self, aggregate_file, capsys):
        assert main([str(aggregate_file)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert MISSING_BASE_PATH_MESSAGE in captured.err

    def test_unreadable_file_exits_with_error(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Cannot read compat data file" in capsys.readouterr().err
