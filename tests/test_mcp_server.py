"""Tests for MCP server tool wrappers.

Mocks at TableRenderer level for wiring checks, and runs the real renderer
for end-to-end tool results. Every result is an ok/data or ok/error envelope.
"""

import pytest

mcp_mod = pytest.importorskip("bytetable.mcp_server", reason="mcp package not installed")

import importlib  # noqa: E402
from unittest.mock import MagicMock, patch  # noqa: E402

from bytetable import config  # noqa: E402
from bytetable.exceptions import CliError  # noqa: E402

_core = importlib.import_module("bytetable.mcp_server._core")


@pytest.fixture(autouse=True)
def _reset_renderer_cache():
    """Reset the cached TableRenderer between tests."""
    _core._renderer = None
    yield
    _core._renderer = None


def _mock_renderer(**method_returns):
    renderer = MagicMock()
    for name, val in method_returns.items():
        getattr(renderer, name).return_value = val
    return renderer


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


class TestToolWiring:
    @patch("bytetable.mcp_server._core.TableRenderer")
    def test_render_table(self, MockRenderer):
        renderer = _mock_renderer(table_result={"table": "t", "row_count": 0})
        MockRenderer.return_value = renderer
        result = mcp_mod.render_table([{"a": 1}], columns=["a"], options={"colors": False})
        renderer.table_result.assert_called_once_with(
            data=[{"a": 1}], properties=["a"], options={"colors": False}
        )
        assert result["ok"] is True
        assert result["data"]["table"] == "t"

    @patch("bytetable.mcp_server._core.TableRenderer")
    def test_render_byte_table_wraps_string(self, MockRenderer):
        MockRenderer.return_value = _mock_renderer(byte_table="bt")
        result = mcp_mod.render_byte_table([1], sort_by="hex", sort_order="desc")
        assert result["data"] == {"table": "bt"}

    @patch("bytetable.mcp_server._core.TableRenderer")
    def test_preview_color_passes_tuple(self, MockRenderer):
        renderer = _mock_renderer(color={"escape": "e"})
        MockRenderer.return_value = renderer
        mcp_mod.preview_color(1, 2, 3)
        renderer.color.assert_called_once_with(color=(1, 2, 3), truecolor=None)

    @patch("bytetable.mcp_server._core.TableRenderer")
    def test_renderer_cached(self, MockRenderer):
        MockRenderer.return_value = _mock_renderer(list_styles=[])
        mcp_mod.list_border_styles()
        mcp_mod.list_border_styles()
        assert MockRenderer.call_count == 1


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    @patch("bytetable.mcp_server._core.TableRenderer")
    def test_cli_error_to_envelope(self, MockRenderer):
        renderer = MagicMock()
        renderer.pack.side_effect = CliError("[ERROR] nope")
        MockRenderer.return_value = renderer
        result = mcp_mod.pack_value(1)
        assert result == {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {"type": "error", "message": "[ERROR] nope"},
        }

    @patch("bytetable.mcp_server._core.TableRenderer")
    def test_unexpected_error(self, MockRenderer):
        renderer = MagicMock()
        renderer.list_styles.side_effect = RuntimeError("kaboom")
        MockRenderer.return_value = renderer
        result = mcp_mod.list_border_styles()
        assert result["ok"] is False
        assert result["error"]["type"] == "unexpected"
        assert "Unexpected error: kaboom" in result["error"]["message"]

    def test_unknown_method(self):
        result = _core._call("__init__")
        assert result["ok"] is False
        assert "Unknown method" in result["error"]["message"]

    def test_invalid_option_from_real_renderer(self):
        result = mcp_mod.render_table([{"a": 1}], options={"border_style": "fancy"})
        assert result["ok"] is False
        assert "Invalid border style" in result["error"]["message"]


# ---------------------------------------------------------------------------
# Real renderer
# ---------------------------------------------------------------------------


class TestEndToEnd:
    def test_render_table(self):
        result = mcp_mod.render_table(
            [{"a": 1}], options={"colors": False, "border_style": "ascii"}
        )
        assert result["schema_version"] == config.CONTRACT_SCHEMA_VERSION
        assert result["data"]["table"].startswith("+")
        assert result["data"]["total_width"] == 13

    def test_pack_value(self):
        result = mcp_mod.pack_value("hi")
        assert result["data"]["type_name"] == "string"

    def test_list_border_styles(self):
        names = [s["name"] for s in mcp_mod.list_border_styles()["data"]["styles"]]
        assert "ascii" in names

    def test_preview_color_out_of_range(self):
        result = mcp_mod.preview_color(400, 50, 50)
        assert result["ok"] is False
        assert "data" not in result


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------


class TestResponseEnvelope:
    def test_success_wrapped(self):
        result = _core._finalize_tool_result({"table": "t"})
        assert result == {
            "ok": True,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "data": {"table": "t"},
        }

    def test_non_dict_wrapped(self):
        assert _core._finalize_tool_result([1])["data"] == [1]

    def test_errors_pass_through(self):
        error = _core._contract_error("bad")
        assert _core._finalize_tool_result(error) is error

    def test_error_matches_cli_envelope_keys(self):
        error = _core._contract_error("bad", "unexpected")
        assert set(error) == {"ok", "schema_version", "error"}
        assert error["error"] == {"type": "unexpected", "message": "bad"}
