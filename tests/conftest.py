"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient

from errors import GenerationError
from main import create_app
from settings import Settings
from upstream import ChatGenerator


class FakeGenerator(ChatGenerator):
    """Records every call and answers with a canned reply or error."""

    def __init__(self, reply="Halo juga!", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, contents):
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings(tmp_path):
    """Settings that never read a real key and serve a throwaway static dir."""
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html><body>chat</body></html>")
    (static_dir / "script.js").write_text("console.log(\"chat\");")
    return Settings(
        API_KEY="test-key",
        MODEL_NAME="gemini-test",
        STATIC_DIR=str(static_dir),
        MAX_HISTORY_TURNS=0,
    )


@pytest.fixture
def make_generator():
    return FakeGenerator


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def failing_generator():
    return FakeGenerator(error=GenerationError("API key not valid"))


@pytest.fixture
def client(settings, generator):
    with TestClient(create_app(settings, generator)) as c:
        yield c
