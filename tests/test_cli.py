"""Tests for the command line entry point."""

import json

import pytest
from click.testing import CliRunner

from comma_fields.__main__ import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_scans_file_lines(self, runner, sample_csv):
        result = runner.invoke(cli, [str(sample_csv)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "foo |  \"bar\" |  'quoted, part'",
            "a |  | b",
            "",
            "\"a,b\" | c",
        ]

    def test_json_output(self, runner, sample_csv):
        result = runner.invoke(cli, [str(sample_csv), "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            ["foo", ' "bar"', " 'quoted, part'"],
            ["a", "", "b"],
            [""],
            ['"a,b"', "c"],
        ]

    def test_skip_blank(self, runner, sample_csv):
        result = runner.invoke(cli, [str(sample_csv), "-f", "json", "--skip-blank"])
        assert result.exit_code == 0
        assert [""] not in json.loads(result.output)

    def test_reads_stdin(self, runner):
        result = runner.invoke(cli, ["-f", "json"], input="x,'y,z'\r\n")
        assert result.exit_code == 0
        assert json.loads(result.output) == [["x", "'y,z'"]]

    def test_empty_stdin(self, runner):
        result = runner.invoke(cli, ["-f", "json"], input="")
        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_markdown_output(self, runner):
        result = runner.invoke(cli, ["-", "-f", "markdown"], input="a,b\n")
        assert result.exit_code == 0
        assert "| 1 | a | b |" in result.output

    def test_format_from_env(self, runner, monkeypatch):
        monkeypatch.setenv("COMMA_FIELDS_FORMAT", "json")
        result = runner.invoke(cli, [], input="a\n")
        assert json.loads(result.output) == [["a"]]

    def test_format_from_yaml(self, runner, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("output:\n  format: json\n", encoding="utf-8")
        result = runner.invoke(cli, ["--config", str(config_file)], input="a,b\n")
        assert json.loads(result.output) == [["a", "b"]]

    def test_undecodable_input(self, runner, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_bytes(b"\xff\xfe\xfa,a\n")
        result = runner.invoke(cli, [str(path)])
        assert result.exit_code == 1
        assert "cannot decode" in result.output

    def test_custom_encoding(self, runner, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes("café,'a,b'\n".encode("latin-1"))
        result = runner.invoke(cli, [str(path), "--encoding", "latin-1", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [["café", "'a,b'"]]

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, [str(tmp_path / "nope.csv")])
        assert result.exit_code == 2
