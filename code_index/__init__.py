"""
Code-index embedders: Gemini embedding adapter behind a small embedder interface.
"""
from code_index.exceptions import (
    EmbedderError,
    EmbeddingError,
    EmbeddingGenerationError,
    NoEmbeddingsReturnedError,
)
from code_index.config import TaskType
from code_index.gemini_embedder import GeminiEmbedder
from code_index.interfaces import Embedder, EmbedderInfo, EmbeddingResponse, EmbeddingUsage

__all__ = [
    "Embedder",
    "EmbedderError",
    "EmbedderInfo",
    "EmbeddingError",
    "EmbeddingGenerationError",
    "EmbeddingResponse",
    "EmbeddingUsage",
    "GeminiEmbedder",
    "NoEmbeddingsReturnedError",
    "TaskType",
]
