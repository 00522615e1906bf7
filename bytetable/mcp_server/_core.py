"""Core helpers: renderer caching, _call dispatcher, response envelope."""

from __future__ import annotations

from bytetable import CliError, TableRenderer
from bytetable.config import CONTRACT_SCHEMA_VERSION

_renderer: TableRenderer | None = None


def _get_renderer() -> TableRenderer:
    """Return a cached TableRenderer, creating one on first use."""
    global _renderer
    if _renderer is None:
        _renderer = TableRenderer()
    return _renderer


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Error envelope, same shape as the CLI's ``--format json`` errors."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "error": {"type": error_type, "message": message},
    }


def _is_error(result) -> bool:
    return isinstance(result, dict) and result.get("ok") is False


def _finalize_tool_result(result):
    """Wrap a successful result as {"ok", "schema_version", "data"}.

    Error envelopes pass through unchanged.
    """
    if _is_error(result):
        return result
    return {
        "ok": True,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "data": result,
    }


_ALLOWED_METHODS = {
    "table_result",
    "byte_table",
    "pack",
    "unpack",
    "list_styles",
    "color",
}


def _call(method_name: str, **kwargs):
    """Call a TableRenderer method, converting exceptions to error envelopes."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}")
    try:
        renderer = _get_renderer()
        return getattr(renderer, method_name)(**kwargs)
    except CliError as e:
        return _contract_error(str(e))
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "unexpected")
