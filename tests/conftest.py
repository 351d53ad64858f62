import json

import pytest

from netparse.llm.base import InferenceClient
from netparse.schemas import ChatMessage, ChatResponse


class StubClient(InferenceClient):
    """Inference client that replies with canned content and records requests."""

    def __init__(self, content: str = "", error: Exception | None = None):
        self.content = content
        self.error = error
        self.requests = []

    async def chat(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return ChatResponse(message=ChatMessage(role="assistant", content=self.content))


@pytest.fixture
def stub_client():
    def _make(content=None, *, value=None, error=None):
        if value is not None:
            content = json.dumps(value)
        return StubClient(content=content or "", error=error)
    return _make
