"""Narrow interface over the Slack Web API used by the tool handlers.

Handlers only talk to ``SlackAPI``; ``SlackClient`` is the production
implementation backed by ``slack_sdk.WebClient``. Tests substitute fakes.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from slack_sdk import WebClient

logger = logging.getLogger(__name__)

USERS_PAGE_SIZE = 200


class SlackAPI(ABC):
    """One method per Slack operation exposed as a tool."""

    @abstractmethod
    def add_reaction(self, name: str, channel: str, timestamp: str) -> None:
        ...

    @abstractmethod
    def get_conversation_history(self, channel: str) -> Dict[str, Any]:
        ...

    @abstractmethod
    def get_conversation_replies(self, channel: str, timestamp: str) -> List[Dict]:
        ...

    @abstractmethod
    def get_user_profile(self, user_id: str) -> Dict[str, Any]:
        ...

    @abstractmethod
    def get_users(self) -> List[Dict]:
        ...

    @abstractmethod
    def get_conversations(self) -> List[Dict]:
        ...

    @abstractmethod
    def post_message(
        self, channel: str, text: str, thread_ts: Optional[str] = None
    ) -> Tuple[str, str]:
        """Post ``text`` to ``channel``; returns ``(channel, ts)`` of the new message."""
        ...


class SlackClient(SlackAPI):
    """SlackAPI backed by a ``slack_sdk.WebClient``.

    Errors from the Web API (``SlackApiError``) and the transport are not
    caught here.
    """

    def __init__(self, client: WebClient):
        self.client = client

    @classmethod
    def from_token(cls, token: str) -> "SlackClient":
        return cls(WebClient(token=token))

    def add_reaction(self, name: str, channel: str, timestamp: str) -> None:
        self.client.reactions_add(channel=channel, timestamp=timestamp, name=name)

    def get_conversation_history(self, channel: str) -> Dict[str, Any]:
        result = self.client.conversations_history(channel=channel)
        return result.data

    def get_conversation_replies(self, channel: str, timestamp: str) -> List[Dict]:
        result = self.client.conversations_replies(channel=channel, ts=timestamp)
        return result["messages"]

    def get_user_profile(self, user_id: str) -> Dict[str, Any]:
        result = self.client.users_profile_get(user=user_id)
        return result["profile"]

    def get_users(self) -> List[Dict]:
        # SlackResponse iterates over cursor-paginated pages.
        users = []
        for page in self.client.users_list(limit=USERS_PAGE_SIZE):
            users.extend(page["members"])
        logger.debug(f"Fetched {len(users)} users")
        return users

    def get_conversations(self) -> List[Dict]:
        result = self.client.conversations_list()
        return result["channels"]

    def post_message(
        self, channel: str, text: str, thread_ts: Optional[str] = None
    ) -> Tuple[str, str]:
        kwargs = {"channel": channel, "text": text}
        if thread_ts is not None:
            kwargs["thread_ts"] = thread_ts
        result = self.client.chat_postMessage(**kwargs)
        return result["channel"], result["ts"]
