"""MCP server exposing the DevSpace CLI as a catalog of tools."""

__version__ = "1.0.0"
