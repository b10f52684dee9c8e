"""
Embedder interface shared by the code-index pipeline: response shapes and the Embedder protocol.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence


@dataclass
class EmbeddingUsage:
    """Token accounting reported by the provider."""
    prompt_tokens: int
    total_tokens: int


@dataclass
class EmbeddingResponse:
    """Vectors for a request, in provider order. Not guaranteed to align with the input texts."""
    embeddings: List[List[float]] = field(default_factory=list)
    usage: Optional[EmbeddingUsage] = None


@dataclass(frozen=True)
class EmbedderInfo:
    name: str


class Embedder(Protocol):
    def create_embeddings(self, texts: Sequence[str], model: Optional[str] = None) -> EmbeddingResponse:
        ...

    @property
    def embedder_info(self) -> EmbedderInfo:
        ...
