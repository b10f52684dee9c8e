"""
Gemini embedding API client: one models.embed_content request per call, all texts at once.
Reshapes the SDK's EmbedContentResponse into {"embeddings": [{"values": [...]}, ...]}.
"""
import logging
from typing import Any, Dict, List, Optional, Protocol

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


class EmbeddingClient(Protocol):
    """The only provider capability the embedder needs."""

    def embed_content(self, model: str, contents: List[str], task_type: str) -> Dict[str, Any]:
        ...


class GenAIEmbeddingClient:
    """EmbeddingClient backed by the google-genai SDK. Building the client makes no request."""

    def __init__(self, api_key: str):
        self._client = genai.Client(api_key=api_key)

    def embed_content(self, model: str, contents: List[str], task_type: str) -> Dict[str, Any]:
        logger.debug("embed_content model=%s texts=%s task_type=%s", model, len(contents), task_type)
        response = self._client.models.embed_content(
            model=model,
            contents=contents,
            config=types.EmbedContentConfig(task_type=task_type),
        )
        return {"embeddings": _to_entries(response.embeddings)}


def _to_entries(embeddings: Optional[list]) -> Optional[List[Dict[str, Any]]]:
    if embeddings is None:
        return None
    return [{"values": list(e.values) if e is not None and e.values is not None else None} for e in embeddings]
