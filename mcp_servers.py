import os
import sys
import dotenv
from claude_agent_sdk.types import McpStdioServerConfig

from slack_mcp.config import DEFAULT_LOG_FILE, SERVER_NAME
from slack_mcp.native_tools import TOOL_DEFINITIONS

dotenv.load_dotenv()

MCP_SERVERS = {
    # Slack MCP Server (subprocess stdio server)
    SERVER_NAME: McpStdioServerConfig(
        type="stdio",
        command=sys.executable,  # Use current Python interpreter
        args=[os.path.join(os.path.dirname(os.path.abspath(__file__)), "slack_mcp_server.py")],
        env={
            "SLACK_BOT_TOKEN": os.getenv("SLACK_BOT_TOKEN", ""),
            "SLACK_MCP_LOG_FILE": os.getenv("SLACK_MCP_LOG_FILE", DEFAULT_LOG_FILE),
        },
    ),
}

# Tool names as an agent sees them: mcp__<server>__<tool>
SLACK_TOOL_PERMISSIONS = [
    f"mcp__{SERVER_NAME}__{definition.name}" for definition in TOOL_DEFINITIONS
]
