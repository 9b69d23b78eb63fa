"""Slack tools registered via Claude Agent SDK's MCP server mechanism."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from claude_agent_sdk import create_sdk_mcp_server, tool

from slack_mcp.config import SERVER_NAME, SERVER_VERSION
from slack_mcp.slack_api import SlackAPI
from slack_mcp.slack_tools import SlackToolHandlers


@dataclass(frozen=True)
class ToolParameter:
    name: str
    description: str
    required: bool = True


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    parameters: List[ToolParameter] = field(default_factory=list)


CHANNEL = ToolParameter("channel", "Channel ID")
TIMESTAMP = ToolParameter("timestamp", "Message timestamp")
TEXT = ToolParameter("text", "Message text")

TOOL_DEFINITIONS = [
    ToolDefinition(
        name="add_reaction",
        description="Add a reaction to a message.",
        parameters=[CHANNEL, TIMESTAMP, ToolParameter("reaction", "Reaction name")],
    ),
    ToolDefinition(
        name="get_channel_history",
        description="Get channel history.",
        parameters=[CHANNEL],
    ),
    ToolDefinition(
        name="get_thread_replies",
        description="Get thread replies.",
        parameters=[CHANNEL, TIMESTAMP],
    ),
    ToolDefinition(
        name="get_user_profile",
        description="Get user profile.",
        parameters=[ToolParameter("user_id", "User ID")],
    ),
    ToolDefinition(name="get_users", description="Get all users."),
    ToolDefinition(name="list_channels", description="List all channels."),
    ToolDefinition(
        name="post_message",
        description="Post a message to a channel.",
        parameters=[CHANNEL, TEXT],
    ),
    ToolDefinition(
        name="reply_to_thread",
        description="Reply to a thread.",
        parameters=[CHANNEL, TIMESTAMP, TEXT],
    ),
]


def build_input_schema(definition: ToolDefinition) -> Dict[str, Any]:
    """Render a tool's parameters as a JSON schema object (all string-typed)."""
    return {
        "type": "object",
        "properties": {
            param.name: {"type": "string", "description": param.description}
            for param in definition.parameters
        },
        "required": [param.name for param in definition.parameters if param.required],
    }


def create_slack_tools(handlers: SlackToolHandlers) -> list:
    """Bind every tool definition to the handler method of the same name."""
    return [
        tool(
            name=definition.name,
            description=definition.description,
            input_schema=build_input_schema(definition),
        )(getattr(handlers, definition.name))
        for definition in TOOL_DEFINITIONS
    ]


def create_slack_tools_server(api: SlackAPI, strict: Optional[bool] = None):
    """Create the SDK MCP server exposing the Slack tools over ``api``."""
    handlers = SlackToolHandlers(api, strict=strict)
    return create_sdk_mcp_server(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        tools=create_slack_tools(handlers),
    )
