from openai import AsyncOpenAI


class OpenAIEmbedder:
    """Embedding client for OpenAI-compatible APIs (OpenAI, Ollama)."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434/v1",
        model: str = "nomic-embed-text",
        api_key: str = "ollama",
        timeout: float = 30.0,
    ):
        """Initialize embedding client.

        Args:
            base_url: API URL.
            model: Embedding model name.
            api_key: API key.
            timeout: Request timeout in seconds.
        """
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key, timeout=timeout)
        self._model = model

    async def embed(self, text: str) -> list[float]:
        response = await self._client.embeddings.create(model=self._model, input=text)
        if not response.data:
            raise ValueError(f"Empty embedding response from {self._model}")
        return list(response.data[0].embedding)
