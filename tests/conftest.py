import copy

import pytest


class ScriptedLLM:
    """Chat client double: returns queued replies and records every call."""

    def __init__(self, replies=None, default="summary"):
        self.replies = list(replies or [])
        self.default = default
        self.calls = []

    def complete(self, messages, model=None, temperature=None):
        self.calls.append(
            {"messages": copy.deepcopy(messages), "model": model, "temperature": temperature}
        )
        if self.replies:
            reply = self.replies.pop(0)
            if isinstance(reply, Exception):
                raise reply
            return reply
        return self.default


class FakeClipboard:
    def __init__(self, content=""):
        self.content = content
        self.writes = []

    def read(self):
        return self.content

    def write(self, text):
        self.writes.append(text)
        self.content = text
        return text


@pytest.fixture()
def llm():
    return ScriptedLLM()


@pytest.fixture()
def clipboard():
    return FakeClipboard()
