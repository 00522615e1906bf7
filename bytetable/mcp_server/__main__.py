"""Entry point for ``python -m bytetable.mcp_server``."""

from bytetable.mcp_server import main

main()
