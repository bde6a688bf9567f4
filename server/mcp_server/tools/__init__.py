from mcp.server.fastmcp import FastMCP
from . import assets, schedules


def register_all_tools(mcp: FastMCP):
    """注册所有 MCP Tools"""
    assets.register(mcp)
    schedules.register(mcp)
