"""Tests for cli.py — argparse, global flags, command dispatch."""

import json
import sys

import pytest

from bytetable import config
from bytetable.cli import (
    _emit_cli_error,
    _extract_global_flags,
    build_parser,
    main,
)
from bytetable.commands import cmd_bytes, cmd_render
from bytetable.exceptions import CliError

# ---------------------------------------------------------------------------
# _extract_global_flags
# ---------------------------------------------------------------------------


class TestExtractGlobalFlags:
    def test_no_flags(self):
        fmt, no_color, quiet, verbose, remaining = _extract_global_flags(["styles"])
        assert fmt == "table"
        assert no_color is False
        assert quiet is False
        assert verbose is False
        assert remaining == ["styles"]

    def test_format_after_command(self):
        fmt, _, _, _, remaining = _extract_global_flags(["styles", "--format", "json"])
        assert fmt == "json"
        assert remaining == ["styles"]

    def test_flags_anywhere(self):
        fmt, no_color, quiet, _, remaining = _extract_global_flags(
            ["render", "--no-color", "[]", "-q", "--style", "ascii"]
        )
        assert no_color is True
        assert quiet is True
        assert remaining == ["render", "[]", "--style", "ascii"]

    def test_invalid_format(self):
        with pytest.raises(CliError, match="Invalid format 'csv'"):
            _extract_global_flags(["styles", "--format", "csv"])

    def test_quiet_and_verbose_exclusive(self):
        with pytest.raises(CliError, match="mutually exclusive"):
            _extract_global_flags(["styles", "-q", "-v"])

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            _extract_global_flags(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out == f"bytetable {config.VERSION}\n"


# ---------------------------------------------------------------------------
# build_parser
# ---------------------------------------------------------------------------


class TestBuildParser:
    def test_render(self):
        ns = build_parser().parse_args(
            ["render", "[]", "--style", "double", "--max-width", "0", "--seed", "3"]
        )
        assert ns.func is cmd_render
        assert ns.data == "[]"
        assert ns.style == "double"
        assert ns.max_width == 0
        assert ns.seed == 3

    def test_render_defaults(self):
        ns = build_parser().parse_args(["render"])
        assert ns.data is None
        assert ns.no_row_numbers is False
        assert ns.truncate is False

    def test_bytes(self):
        ns = build_parser().parse_args(["bytes", "[1]", "--sort-by", "hex", "--order", "desc"])
        assert ns.func is cmd_bytes
        assert ns.sort_by == "hex"
        assert ns.order == "desc"

    def test_invalid_style_raises_cli_error(self):
        with pytest.raises(CliError, match=r"^\[ERROR\]"):
            build_parser().parse_args(["render", "[]", "--style", "fancy"])

    def test_negative_max_width(self):
        with pytest.raises(CliError, match="non-negative"):
            build_parser().parse_args(["render", "[]", "--max-width", "-1"])

    def test_unknown_command(self):
        with pytest.raises(CliError):
            build_parser().parse_args(["frobnicate"])


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_usage_error_json_envelope(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["bytetable", "--format", "json", "frobnicate"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 1
        error = json.loads(capsys.readouterr().err)["error"]
        assert error["type"] == "error"
        assert error["message"].startswith("[ERROR] ")

    def test_emit_json(self, capsys):
        _emit_cli_error(CliError("[ERROR] bad"), "json")
        payload = json.loads(capsys.readouterr().err)
        assert payload == {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {"type": "error", "message": "[ERROR] bad", "exit_code": 1},
        }

    def test_emit_table(self, capsys):
        _emit_cli_error(CliError("[ERROR] bad"), "table")
        assert capsys.readouterr().err == "[ERROR] bad\n"


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["bytetable", *args])
    main()


class TestMain:
    def test_no_args_prints_help(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch)
        assert exc.value.code == 0
        assert "Usage: bytetable" in capsys.readouterr().out

    def test_render(self, monkeypatch, capsys):
        _run(monkeypatch, "render", '[{"a": 1}]', "--style", "ascii", "--no-color")
        out = capsys.readouterr().out
        assert out.startswith("+")
        assert "\x1b" not in out

    def test_no_color_sets_config(self, monkeypatch, capsys):
        _run(monkeypatch, "--no-color", "styles")
        assert config.COLORS_ENABLED is False

    def test_verbose_enables_render_log(self, monkeypatch, capsys):
        _run(monkeypatch, "render", "[]", "-v", "--no-color")
        assert config.RENDER_LOG_ENABLED is True
        assert "[RENDER]" in capsys.readouterr().err

    def test_version_command(self, monkeypatch, capsys):
        _run(monkeypatch, "version")
        assert capsys.readouterr().out == f"bytetable {config.VERSION}\n"

    def test_error_exit_code_and_json_envelope(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "render", "[{", "--format", "json")
        assert exc.value.code == 1
        payload = json.loads(capsys.readouterr().err)
        assert payload["ok"] is False
        assert "Invalid JSON" in payload["error"]["message"]

    def test_error_plain_text(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "color", "red")
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("[ERROR] Invalid color")

    def test_help_flag(self, monkeypatch, capsys):
        with pytest.raises(SystemExit):
            _run(monkeypatch, "--help")
        assert "Commands:" in capsys.readouterr().out
