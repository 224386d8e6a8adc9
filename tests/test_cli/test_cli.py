"""Tests for the cssedit command line."""

import json

import pytest
from click.testing import CliRunner

from cssedit import __version__
from cssedit.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def css_file(tmp_path):
    path = tmp_path / "style.css"
    path.write_text("/* theme */\n.btn {color: red; padding:  4px ;}\n.a{}\n", encoding="utf-8")
    return path


class TestFormatCommand:
    def test_formats_file(self, runner, css_file):
        result = runner.invoke(cli, ["format", str(css_file)])
        assert result.exit_code == 0
        assert result.output == ".btn {\n  color: red;\n  padding: 4px;\n}\n"

    def test_reads_stdin(self, runner):
        result = runner.invoke(cli, ["format", "-"], input="a{b:c}")
        assert result.exit_code == 0
        assert result.output == "a {\n  b: c;\n}\n"

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["format", str(tmp_path / "nope.css")])
        assert result.exit_code == 2


class TestParseCommand:
    def test_outputs_json_rules(self, runner, css_file):
        result = runner.invoke(cli, ["parse", str(css_file)])
        assert result.exit_code == 0
        rules = json.loads(result.output)
        assert len(rules) == 1
        assert rules[0]["selector"] == ".btn"
        assert rules[0]["declarations"][1] == {"property": "padding", "value": "4px"}


class TestEscapeCommands:
    def test_escape(self, runner):
        result = runner.invoke(cli, ["escape", "-"], input='a {\n  content: "x";\n}')
        assert result.exit_code == 0
        assert result.output == 'a {\\r\\n  content: \\"x\\";\\r\\n}\n'

    def test_escape_reads_file_bytes(self, runner, tmp_path):
        path = tmp_path / "crlf.css"
        path.write_bytes(b"a {\r\n  b: c;\r\n}")
        result = runner.invoke(cli, ["escape", str(path)])
        assert result.exit_code == 0
        assert result.output == "a {\\r\\n  b: c;\\r\\n}\n"

    def test_escape_keeps_lone_carriage_return(self, runner):
        result = runner.invoke(cli, ["escape", "-"], input=b"a\rb")
        assert result.exit_code == 0
        assert result.output == "a\rb\n"

    def test_unescape(self, runner):
        result = runner.invoke(cli, ["unescape", "-"], input='a {\\r\\n  content: \\"x\\";\\r\\n}\n')
        assert result.exit_code == 0
        assert result.output == 'a {\n  content: "x";\n}\n'

    def test_unescape_strips_only_one_trailing_newline(self, runner):
        result = runner.invoke(cli, ["unescape", "-"], input="a\n\n")
        assert result.exit_code == 0
        assert result.output == "a\n\n"


class TestGroup:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        for name in ("format", "parse", "escape", "unescape", "serve"):
            assert name in result.output
