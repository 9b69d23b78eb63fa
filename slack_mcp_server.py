#!/usr/bin/env python3
"""Standalone Slack MCP server for subprocess execution.

This server provides Slack tools via MCP protocol using stdio transport.
Requires SLACK_BOT_TOKEN; logs go to SLACK_MCP_LOG_FILE since stdout carries
the protocol.
"""

import asyncio
import logging
import sys
from typing import Optional

from mcp.server.stdio import stdio_server

from slack_mcp.config import ConfigError, get_log_file, get_log_level, get_slack_token
from slack_mcp.native_tools import create_slack_tools_server
from slack_mcp.slack_api import SlackClient

logger = logging.getLogger(__name__)


def setup_logging(log_file: Optional[str] = None) -> None:
    """Append log lines to ``log_file``; exits if the file cannot be opened."""
    log_file = log_file or get_log_file()
    try:
        handler = logging.FileHandler(log_file, mode="a")
    except OSError as e:
        print(f"Fatal: could not open log file: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=[handler],
        force=True,
    )


def load_token() -> str:
    """Read the Slack token; exits with status 1 if it is not set."""
    try:
        return get_slack_token()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(f"Error: {e}")
        sys.exit(1)


async def serve(server) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    # Get the MCP server instance
    mcp_instance = server["instance"]

    async with stdio_server() as (read_stream, write_stream):
        await mcp_instance.run(
            read_stream,
            write_stream,
            mcp_instance.create_initialization_options(),
        )


async def main():
    """Run the Slack MCP server."""
    setup_logging()
    token = load_token()

    server = create_slack_tools_server(SlackClient.from_token(token))
    logger.info("Starting Slack MCP server on stdio")

    try:
        await serve(server)
    except Exception as e:
        logger.critical(f"Server error: {str(e)}", exc_info=True)
        sys.exit(1)


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
