"""Answer service - grounded synthesis with raw-context fallback."""

import logging

from ..models.answer import Answer, AnswerMode
from ..models.search import Context
from ..protocols.llm import LLMProtocol

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are OpsMind AI, an assistant that answers questions about company documents.

CONTEXT:
{sources}

QUESTION: {question}

INSTRUCTIONS:
1. Answer ONLY using the context above. Do not use prior knowledge.
2. If the context does not contain the answer, say "I don't know" and stop.
3. Cite sources inline like [FileName, Page X].
4. Keep the answer concise and accurate.

ANSWER:
"""

SOURCE_TEMPLATE = "[Source {index}: {filename}, Page: {page}]\n{text}"

FALLBACK_TEMPLATE = """**AI Generation Unavailable (Fallback Mode)**

I couldn't generate a summarized answer due to API limitations, but here is the most relevant information found in your documents:

{context}"""


class AnswerService:
    """Synthesize answers from context through a generation provider."""

    def __init__(self, llm: LLMProtocol):
        self._llm = llm

    def build_prompt(self, question: str, context: Context) -> str:
        """Prompt with each chunk labeled by its source for citation."""
        if context.chunks:
            sources = "\n\n".join(
                SOURCE_TEMPLATE.format(
                    index=i, filename=c.filename, page=c.page_number, text=c.text
                )
                for i, c in enumerate(context.chunks, 1)
            )
        else:
            sources = context.text
        return PROMPT_TEMPLATE.format(sources=sources, question=question)

    @staticmethod
    def fallback_answer(context: Context) -> str:
        return FALLBACK_TEMPLATE.format(context=context.text)

    async def synthesize(self, question: str, context: Context) -> Answer:
        """Answer the question from the context.

        Provider errors are not raised: the answer degrades to the raw
        context wrapped in the fallback template.

        Args:
            question: User question.
            context: Assembled context.

        Returns:
            Answer with the context's sources.
        """
        prompt = self.build_prompt(question, context)

        try:
            text = await self._llm.generate(prompt)
        except Exception as e:
            logger.error(f"Generation error, using fallback answer: {e}")
            return Answer(
                text=self.fallback_answer(context),
                sources=context.sources,
                mode=AnswerMode.FALLBACK,
            )

        return Answer(text=text, sources=context.sources, mode=AnswerMode.SYNTHESIZED)
