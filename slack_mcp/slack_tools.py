"""Slack tool handlers for the MCP server.

Each handler decodes its arguments, makes exactly one Slack call through the
``SlackAPI`` port, and returns the JSON-serialized result as a single text
content block. Errors are logged and re-raised so the MCP server reports
them to the caller as tool errors.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from slack_sdk.errors import SlackApiError

from slack_mcp.config import strict_arguments_enabled
from slack_mcp.slack_api import SlackAPI

logger = logging.getLogger(__name__)


class ToolArgumentError(ValueError):
    """A required tool argument is missing or not a string."""

    def __init__(self, field: str, value: Any = None):
        self.field = field
        if value is None:
            message = f"missing required argument: {field}"
        else:
            message = (
                f"argument {field} must be a string, got {type(value).__name__}"
            )
        super().__init__(message)


# ============================================================================
# ARGUMENT EXTRACTION
# ============================================================================


def string_arg(args: Optional[Dict[str, Any]], name: str) -> str:
    """Return ``args[name]`` if it is a string, else an empty string."""
    if not args:
        return ""
    value = args.get(name)
    return value if isinstance(value, str) else ""


def require_string(args: Optional[Dict[str, Any]], name: str) -> str:
    """Return ``args[name]``, raising ToolArgumentError if absent or not a string."""
    value = (args or {}).get(name)
    if not isinstance(value, str):
        raise ToolArgumentError(name, value)
    return value


def _extract(args: Optional[Dict[str, Any]], name: str, strict: bool) -> str:
    return require_string(args, name) if strict else string_arg(args, name)


# ============================================================================
# TYPED REQUESTS
# ============================================================================


@dataclass(frozen=True)
class AddReactionRequest:
    channel: str
    timestamp: str
    reaction: str

    @classmethod
    def from_arguments(cls, args, strict: bool = True) -> "AddReactionRequest":
        return cls(
            channel=_extract(args, "channel", strict),
            timestamp=_extract(args, "timestamp", strict),
            reaction=_extract(args, "reaction", strict),
        )


@dataclass(frozen=True)
class ChannelHistoryRequest:
    channel: str

    @classmethod
    def from_arguments(cls, args, strict: bool = True) -> "ChannelHistoryRequest":
        return cls(channel=_extract(args, "channel", strict))


@dataclass(frozen=True)
class ThreadRepliesRequest:
    channel: str
    timestamp: str

    @classmethod
    def from_arguments(cls, args, strict: bool = True) -> "ThreadRepliesRequest":
        return cls(
            channel=_extract(args, "channel", strict),
            timestamp=_extract(args, "timestamp", strict),
        )


@dataclass(frozen=True)
class UserProfileRequest:
    user_id: str

    @classmethod
    def from_arguments(cls, args, strict: bool = True) -> "UserProfileRequest":
        return cls(user_id=_extract(args, "user_id", strict))


@dataclass(frozen=True)
class PostMessageRequest:
    channel: str
    text: str

    @classmethod
    def from_arguments(cls, args, strict: bool = True) -> "PostMessageRequest":
        return cls(
            channel=_extract(args, "channel", strict),
            text=_extract(args, "text", strict),
        )


@dataclass(frozen=True)
class ReplyToThreadRequest:
    channel: str
    timestamp: str
    text: str

    @classmethod
    def from_arguments(cls, args, strict: bool = True) -> "ReplyToThreadRequest":
        return cls(
            channel=_extract(args, "channel", strict),
            timestamp=_extract(args, "timestamp", strict),
            text=_extract(args, "text", strict),
        )


# ============================================================================
# HANDLERS
# ============================================================================


def _text_result(text: str) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


def _json_result(value: Any) -> Dict[str, Any]:
    return _text_result(json.dumps(value))


class SlackToolHandlers:
    """Tool handlers sharing one Slack API handle.

    Handlers take the raw MCP argument dict and return a content dict in the
    shape ``create_sdk_mcp_server`` expects.
    """

    def __init__(self, api: SlackAPI, strict: Optional[bool] = None):
        self.api = api
        self.strict = strict_arguments_enabled() if strict is None else strict

    def _call(self, tool_name: str, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except SlackApiError as e:
            logger.error(f"{tool_name}: Slack API error: {str(e)}")
            raise
        except Exception as e:
            logger.error(f"{tool_name}: {str(e)}", exc_info=True)
            raise

    async def add_reaction(self, args: Dict[str, Any]) -> Dict[str, Any]:
        request = AddReactionRequest.from_arguments(args, self.strict)
        logger.info(
            f"Adding reaction :{request.reaction}: to {request.channel}/{request.timestamp}"
        )
        self._call(
            "add_reaction",
            self.api.add_reaction,
            request.reaction,
            request.channel,
            request.timestamp,
        )
        return _text_result("success")

    async def get_channel_history(self, args: Dict[str, Any]) -> Dict[str, Any]:
        request = ChannelHistoryRequest.from_arguments(args, self.strict)
        logger.info(f"Fetching history for channel {request.channel}")
        history = self._call(
            "get_channel_history", self.api.get_conversation_history, request.channel
        )
        return _json_result(history)

    async def get_thread_replies(self, args: Dict[str, Any]) -> Dict[str, Any]:
        request = ThreadRepliesRequest.from_arguments(args, self.strict)
        logger.info(f"Fetching replies for {request.channel}/{request.timestamp}")
        messages = self._call(
            "get_thread_replies",
            self.api.get_conversation_replies,
            request.channel,
            request.timestamp,
        )
        return _json_result(messages)

    async def get_user_profile(self, args: Dict[str, Any]) -> Dict[str, Any]:
        request = UserProfileRequest.from_arguments(args, self.strict)
        logger.info(f"Fetching profile for user {request.user_id}")
        profile = self._call(
            "get_user_profile", self.api.get_user_profile, request.user_id
        )
        return _json_result(profile)

    async def get_users(self, args: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Fetching users")
        users = self._call("get_users", self.api.get_users)
        return _json_result(users)

    async def list_channels(self, args: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Listing channels")
        channels = self._call("list_channels", self.api.get_conversations)
        return _json_result(channels)

    async def post_message(self, args: Dict[str, Any]) -> Dict[str, Any]:
        request = PostMessageRequest.from_arguments(args, self.strict)
        logger.info(f"Posting message to {request.channel}")
        channel, timestamp = self._call(
            "post_message", self.api.post_message, request.channel, request.text
        )
        return _json_result({"channel": channel, "timestamp": timestamp})

    async def reply_to_thread(self, args: Dict[str, Any]) -> Dict[str, Any]:
        request = ReplyToThreadRequest.from_arguments(args, self.strict)
        logger.info(f"Replying to thread {request.channel}/{request.timestamp}")
        channel, timestamp = self._call(
            "reply_to_thread",
            self.api.post_message,
            request.channel,
            request.text,
            thread_ts=request.timestamp,
        )
        return _json_result({"channel": channel, "timestamp": timestamp})
