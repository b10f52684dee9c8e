"""
Environment config for the code-index embedders.
Load from env or .env; used by GeminiEmbedder and scripts/embed_texts.py.
"""
from enum import Enum
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class TaskType(str, Enum):
    """Task type hints understood by the Gemini embedding API."""
    CODE_RETRIEVAL_QUERY = "CODE_RETRIEVAL_QUERY"
    RETRIEVAL_QUERY = "RETRIEVAL_QUERY"
    RETRIEVAL_DOCUMENT = "RETRIEVAL_DOCUMENT"
    SEMANTIC_SIMILARITY = "SEMANTIC_SIMILARITY"
    CLASSIFICATION = "CLASSIFICATION"
    CLUSTERING = "CLUSTERING"
    QUESTION_ANSWERING = "QUESTION_ANSWERING"
    FACT_VERIFICATION = "FACT_VERIFICATION"


class Settings(BaseSettings):
    """Settings from env (e.g. .env or exported GEMINI_API_KEY)."""

    # Gemini
    gemini_api_key: str = ""

    # Embedding model; empty falls back to the embedder default
    api_model_id: Optional[str] = None

    # Task type hint; empty falls back to CODE_RETRIEVAL_QUERY
    gemini_embedding_task_type: Optional[TaskType] = None

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("gemini_embedding_task_type", mode="before")
    @classmethod
    def _blank_task_type(cls, v):
        if v is None or isinstance(v, TaskType):
            return v
        return str(v).strip().upper() or None


def get_settings() -> Settings:
    return Settings()
