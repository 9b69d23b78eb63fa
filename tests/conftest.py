"""Pytest configuration and shared fixtures."""

import logging

import pytest

from slack_mcp.slack_api import SlackAPI


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


class FakeSlackAPI(SlackAPI):
    """In-memory SlackAPI returning canned values and recording calls."""

    def __init__(self, **returns):
        self.returns = returns
        self.calls = []
        self.error = None

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error
        return self.returns.get(name)

    def add_reaction(self, name, channel, timestamp):
        return self._record("add_reaction", name, channel, timestamp)

    def get_conversation_history(self, channel):
        return self._record("get_conversation_history", channel)

    def get_conversation_replies(self, channel, timestamp):
        return self._record("get_conversation_replies", channel, timestamp)

    def get_user_profile(self, user_id):
        return self._record("get_user_profile", user_id)

    def get_users(self):
        return self._record("get_users")

    def get_conversations(self):
        return self._record("get_conversations")

    def post_message(self, channel, text, thread_ts=None):
        return self._record("post_message", channel, text, thread_ts=thread_ts)


@pytest.fixture
def fake_api():
    return FakeSlackAPI(
        get_conversation_history={
            "ok": True,
            "messages": [{"type": "message", "user": "U1", "text": "hello", "ts": "1.1"}],
            "has_more": False,
        },
        get_conversation_replies=[
            {"ts": "1.1", "text": "parent"},
            {"ts": "1.2", "text": "reply", "thread_ts": "1.1"},
        ],
        get_user_profile={"real_name": "Ada Lovelace", "email": "ada@example.com"},
        get_users=[{"id": "U1", "name": "ada"}, {"id": "U2", "name": "grace"}],
        get_conversations=[{"id": "C1", "name": "general"}],
        post_message=("C1", "123.456"),
    )


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)

