from mcp.server.fastmcp import FastMCP
from .config import config

mcp = FastMCP(
    "amortization-engine",
    instructions="折旧与分期计算 MCP Server — 资产折旧指标、分期预览、对账、结算校验",
    port=config.sse_port,
)

# 注册所有 Tools
from .tools import register_all_tools
register_all_tools(mcp)

if __name__ == "__main__":
    if config.transport == "sse":
        mcp.run(transport="sse")
    else:
        mcp.run(transport="stdio")
