import asyncio
import logging
from functools import cached_property

import numpy as np
from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)


class SentenceTransformerEmbedder:
    def __init__(self, model_name: str = "intfloat/multilingual-e5-base"):
        self._model_name = model_name

    @cached_property
    def model(self) -> SentenceTransformer:
        logger.info(f"Loading embedding model: {self._model_name}")
        return SentenceTransformer(self._model_name)

    def encode(self, text: str) -> np.ndarray:
        return self.model.encode(text, convert_to_numpy=True)

    async def embed(self, text: str) -> list[float]:
        vector = await asyncio.to_thread(self.encode, text)
        return vector.tolist()
