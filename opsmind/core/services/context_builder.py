"""Context builder - ranked chunks to grounding text with citations."""

import logging
from typing import Optional, Sequence

from ..models.search import Context, RankedChunk

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


class ContextBuilder:
    """Concatenate the top ranked chunks into a context."""

    def __init__(self, top_k: Optional[int] = 3):
        self._top_k = top_k

    def build(self, ranked: Sequence[RankedChunk]) -> Context:
        """Join ranked chunk texts with a blank line.

        Input is expected in ranked order. At most top_k chunks are used, so
        the context stays bounded for callers that pass a longer list than
        the ranker returns.
        """
        if self._top_k is not None:
            ranked = ranked[: self._top_k]

        if not ranked:
            return Context(text="")

        context = Context(
            text=SEPARATOR.join(r.text for r in ranked),
            chunks=tuple(ranked),
        )
        logger.debug(
            f"Context: {len(context.chunks)} chunks, {len(context.text)} chars"
        )
        return context
