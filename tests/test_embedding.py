import json
from types import SimpleNamespace

import pytest

from code_index import GeminiEmbedder
from code_index.config import Settings
from code_index.embedding import GenAIEmbeddingClient


def vectors(n, dim=3):
    return [[float(i)] * dim for i in range(n)]


@pytest.fixture
def transport(monkeypatch):
    """Stub the SDK's HTTP request; request building and response parsing stay real."""
    state = {"calls": [], "body": {"embeddings": []}}

    def attach(client: GenAIEmbeddingClient):
        def fake_request(http_method, path, request_dict, http_options=None, *args, **kwargs):
            state["calls"].append({"method": http_method, "path": path, "request": request_dict})
            return SimpleNamespace(headers={}, body=json.dumps(state["body"]))

        monkeypatch.setattr(client._client._api_client, "request", fake_request)
        return client

    state["attach"] = attach
    return state


def test_construction_makes_no_request(transport):
    client = transport["attach"](GenAIEmbeddingClient(api_key="k"))
    assert client is not None
    assert transport["calls"] == []


def test_code_retrieval_task_type_is_sent(transport):
    transport["body"] = {"embeddings": [{"values": v} for v in vectors(2)]}
    client = transport["attach"](GenAIEmbeddingClient(api_key="k"))
    out = client.embed_content(model="gemini-embedding-exp-03-07", contents=["a", "b"], task_type="CODE_RETRIEVAL_QUERY")
    assert out == {"embeddings": [{"values": [0.0, 0.0, 0.0]}, {"values": [1.0, 1.0, 1.0]}]}
    assert len(transport["calls"]) == 1
    call = transport["calls"][0]
    assert "gemini-embedding-exp-03-07" in call["path"]
    assert "CODE_RETRIEVAL_QUERY" in json.dumps(call["request"], default=str)


def test_missing_embeddings_in_answer(transport):
    transport["body"] = {}
    client = transport["attach"](GenAIEmbeddingClient(api_key="k"))
    assert client.embed_content(model="m", contents=["a"], task_type="RETRIEVAL_QUERY") == {"embeddings": None}


def test_default_embedder_works_end_to_end(transport):
    transport["body"] = {"embeddings": [{"values": v} for v in vectors(2)]}
    client = transport["attach"](GenAIEmbeddingClient(api_key="k"))
    result = GeminiEmbedder(Settings(gemini_api_key="k"), client=client).create_embeddings(["foo", "bar"])
    assert result.embeddings == vectors(2)


def test_more_than_one_hundred_texts_is_one_request(transport):
    transport["body"] = {"embeddings": [{"values": v} for v in vectors(150)]}
    client = transport["attach"](GenAIEmbeddingClient(api_key="k"))
    texts = ["text %s" % i for i in range(150)]
    result = GeminiEmbedder(Settings(gemini_api_key="k"), client=client).create_embeddings(texts)
    assert len(transport["calls"]) == 1
    assert len(result.embeddings) == 150
