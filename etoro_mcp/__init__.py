"""eToro MCP server: tool adapter for the eToro public brokerage API."""

__version__ = "1.0.0"
