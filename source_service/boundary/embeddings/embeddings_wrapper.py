"""
Gemini embeddings pinned to the vector index dimension.

GoogleGenerativeAIEmbeddings ignores output_dimensionality given to the
constructor, so the dimension is forced on every call and the returned
vectors are checked before they reach the index.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the vector index
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """Gemini embeddings that always return vectors of one dimension."""

    _dimension: int = 768

    def __init__(self, model: str, dimension: int = 768, **kwargs) -> None:
        """
        Args:
            model: Gemini embedding model ID
            dimension: Dimension of the target index
            **kwargs: Passed through to GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._dimension = dimension
        logger.info(f"{__name__}:__init__ - Embeddings ready: model={model}, dimension={dimension}")

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed_documents(
        self,
        texts: list[str],
        *,
        task_type: str | None = None,
        **kwargs,
    ) -> list[list[float]]:
        """
        Embed texts at the pinned dimension.

        Raises:
            ValueError: The provider returned a vector of another size
        """
        kwargs["output_dimensionality"] = self._dimension
        vectors = super().embed_documents(texts, task_type=task_type, **kwargs)
        for vector in vectors:
            if len(vector) != self._dimension:
                raise ValueError(
                    f"Expected {self._dimension}-dimensional embedding, got {len(vector)}"
                )
        return vectors
