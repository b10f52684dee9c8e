"""
Embedder exceptions. Causes are chained with `raise ... from ...`.
"""


class EmbedderError(Exception):
    """Base exception for all embedder errors"""
    pass


class EmbeddingGenerationError(EmbedderError):
    """Raised when the provider call or its response handling fails"""
    pass


class NoEmbeddingsReturnedError(EmbeddingGenerationError):
    """Raised when the provider answers without an embeddings field"""
    pass


class EmbeddingError(EmbedderError):
    """Raised by create_embeddings for any failure; see __cause__ for the origin"""
    pass
