"""MCP server converting images to Base64 data URLs and back."""

__version__ = "0.1.0"
