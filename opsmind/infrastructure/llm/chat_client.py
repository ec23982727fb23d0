import logging

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are OpsMind AI, an assistant for analyzing enterprise SOPs.

- Answer strictly from the document context provided in the user message.
- If the context does not contain the answer, say that you don't know.
- Never invent procedures, contacts or rules that are not in the context."""


class ChatCompletionClient:
    """LLM client for OpenAI-compatible chat APIs (OpenAI, Ollama)."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434/v1",
        model: str = "qwen2.5:7b",
        api_key: str = "ollama",
        max_tokens: int = 1024,
        temperature: float = 0.1,
        timeout: float = 60.0,
    ):
        """Initialize chat client.

        Args:
            base_url: API URL.
            model: Model name.
            api_key: API key.
            max_tokens: Max response tokens.
            temperature: Sampling temperature.
            timeout: Request timeout in seconds.
        """
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key, timeout=timeout)
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def generate(self, prompt: str) -> str:
        """Generate a completion.

        Args:
            prompt: User prompt with context.

        Returns:
            Response text.
        """
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )

        content = response.choices[0].message.content
        if not content:
            raise ValueError(f"Empty completion from {self._model}")

        logger.debug(f"[llm] {len(content)} chars from {self._model}")
        return content
