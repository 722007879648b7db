import pytest
from fastapi.testclient import TestClient
from main import app
from api.routes.calories_route import get_completion


class FakeCompletion:
    """Stands in for the completion API: returns canned replies and records prompts."""

    def __init__(self, *replies, error=None):
        self.replies = list(replies) or ["300"]
        self.error = error
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


@pytest.fixture
def fake_completion():
    return FakeCompletion


@pytest.fixture
def api():
    """Returns a function that builds a TestClient wired to the given fake completion."""
    clients = []

    def _mk(completion):
        app.dependency_overrides[get_completion] = lambda: completion
        client = TestClient(app)
        clients.append(client)
        return client

    yield _mk
    app.dependency_overrides.clear()
    for c in clients:
        c.close()
