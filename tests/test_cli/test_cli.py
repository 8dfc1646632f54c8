"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from selectorkit import __version__, builder, to_json
from selectorkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selector strings" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "build" in result.output
        assert "render" in result.output
        assert "area" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_id_and_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_all_fragments_in_canonical_order(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "build",
                "--pseudo-element", "after",
                "--pseudo-class", "hover",
                "--class", "card",
                "--id", "main",
                "--attr", "data-x",
                "--element", "div",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div[data-x]#main.card:hover::after"

    def test_json_output(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "--element", "a", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["kind"] == "simple"
        assert data["tag"] == "a"

    def test_json_output_indented(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--indent", "2", "build", "--element", "a", "--json"])
        assert result.exit_code == 0
        assert '\n  "kind": "simple"' in result.output

    def test_no_fragments_fails(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code == 1
        assert "at least one selector fragment" in result.output

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "build", "--element", "p"])
        assert result.exit_code == 0
        assert "p" in result.output


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render_combined(self, tmp_path: Path) -> None:
        sel = builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.combine(builder.element("tr"), " ", builder.element("td")),
        )
        path = tmp_path / "selector.json"
        path.write_text(to_json(sel), encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == "div#main + tr   td"

    def test_render_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Decode error" in result.output

    def test_render_invalid_combinator(self, tmp_path: Path) -> None:
        doc = {
            "kind": "combined",
            "left": {"kind": "simple", "tag": "a"},
            "combinator": "|",
            "right": {"kind": "simple", "tag": "b"},
        }
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(doc), encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Invalid combinator" in result.output

    def test_render_empty_selector(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text('{"kind": "simple"}', encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "no fragments" in result.output

    def test_render_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe{")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Decode error" in result.output

    def test_render_deeply_nested_json(self, tmp_path: Path) -> None:
        path = tmp_path / "deep.json"
        path.write_text("[" * 100_000, encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Decode error" in result.output

    def test_render_missing_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["render", "/nonexistent/selector.json"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_integer_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_fractional_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "2.5", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "7.5"
