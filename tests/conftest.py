import pytest

from code_index.config import Settings


class FakeEmbeddingClient:
    """Records embed_content calls and answers with a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def embed_content(self, model, contents, task_type):
        self.calls.append({"model": model, "contents": contents, "task_type": task_type})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "GOOGLE_GENAI_USE_VERTEXAI",
        "API_MODEL_ID",
        "GEMINI_EMBEDDING_TASK_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def fake_client():
    return FakeEmbeddingClient(
        response={
            "embeddings": [{"values": [0.1, 0.2, 0.3]}, {"values": [0.4, 0.5, 0.6]}],
            "usage": {"prompt_tokens": 4, "total_tokens": 4},
        }
    )
