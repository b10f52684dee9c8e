"""
Gemini embedder for the code index: resolves model/task type defaults once,
issues one provider call per request and normalizes the vectors.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from code_index.config import Settings, TaskType, get_settings
from code_index.embedding import EmbeddingClient, GenAIEmbeddingClient
from code_index.exceptions import EmbeddingError, EmbeddingGenerationError, NoEmbeddingsReturnedError
from code_index.interfaces import EmbedderInfo, EmbeddingResponse, EmbeddingUsage

DEFAULT_MODEL_ID = "gemini-embedding-exp-03-07"
DEFAULT_TASK_TYPE = TaskType.CODE_RETRIEVAL_QUERY.value


@dataclass(frozen=True)
class EmbedderConfig:
    model_id: str
    task_type: str


class GeminiEmbedder:
    """
    Embedder backed by Google Gemini.

    The provider capability is injected (`client`); by default a
    GenAIEmbeddingClient is built from settings.gemini_api_key.
    Entries without a vector are dropped, so embeddings[i] is not guaranteed
    to belong to texts[i].
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[EmbeddingClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        settings = settings or get_settings()
        self._config = EmbedderConfig(
            model_id=settings.api_model_id or DEFAULT_MODEL_ID,
            task_type=(settings.gemini_embedding_task_type or TaskType.CODE_RETRIEVAL_QUERY).value,
        )
        self._client = client if client is not None else GenAIEmbeddingClient(api_key=settings.gemini_api_key)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config(self) -> EmbedderConfig:
        return self._config

    def create_embeddings(self, texts: Sequence[str], model: Optional[str] = None) -> EmbeddingResponse:
        """
        Embed texts with one provider call.

        Args:
            texts: Non-empty sequence of strings to embed.
            model: Optional model id overriding the configured one.

        Returns:
            EmbeddingResponse with the vectors and, when reported, token usage.

        Raises:
            ValueError: If texts is empty.
            EmbeddingError: If the provider call fails or returns no embeddings.
        """
        if not texts:
            raise ValueError("texts must not be empty")
        try:
            return self._generate_embeddings(texts, model, self._config.task_type)
        except Exception as e:
            self._logger.error("Gemini embedding failed: %s", e, exc_info=True)
            raise EmbeddingError(f"Gemini embedding failed: {e}") from e

    def _generate_embeddings(
        self,
        texts: Sequence[str],
        model: Optional[str] = None,
        task_type: str = DEFAULT_TASK_TYPE,
    ) -> EmbeddingResponse:
        try:
            model_id = model or self._config.model_id
            response = self._client.embed_content(model=model_id, contents=list(texts), task_type=task_type)

            entries = response.get("embeddings") if response else None
            if entries is None:
                raise NoEmbeddingsReturnedError("No embeddings returned from Gemini API")

            embeddings: List[List[float]] = []
            for entry in entries:
                values = (entry or {}).get("values")
                if values:
                    embeddings.append(list(values))
            dropped = len(entries) - len(embeddings)
            if dropped:
                self._logger.debug("Dropped %s empty embeddings of %s (model=%s)", dropped, len(entries), model_id)

            return EmbeddingResponse(embeddings=embeddings, usage=_usage_from(response.get("usage")))
        except NoEmbeddingsReturnedError as e:
            raise NoEmbeddingsReturnedError(f"Gemini embeddings error: {e}") from e
        except Exception as e:
            raise EmbeddingGenerationError(f"Gemini embeddings error: {e}") from e

    @property
    def embedder_info(self) -> EmbedderInfo:
        return EmbedderInfo(name="gemini")


def _usage_from(usage: Optional[Dict[str, Any]]) -> Optional[EmbeddingUsage]:
    if not usage:
        return None
    prompt = usage.get("prompt_tokens", usage.get("promptTokens"))
    total = usage.get("total_tokens", usage.get("totalTokens"))
    if prompt is None or total is None:
        return None
    return EmbeddingUsage(prompt_tokens=int(prompt), total_tokens=int(total))
