"""
Calculator MCP server.

Arithmetic tools (add, subtract, multiply, divide, power, sqrt) exposed over
the Model Context Protocol on stdio and HTTP/SSE transports.
"""

__version__ = "1.0.0"
