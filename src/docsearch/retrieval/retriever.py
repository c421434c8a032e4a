"""Near-text retrieval over the documentation collection.

Usage::

    from docsearch.retrieval.retriever import RetrievalService

    service = RetrievalService(store)
    matches = service.search("pizza dough recipe")
    print(service.report("pizza dough recipe", matches))
"""

from __future__ import annotations

import logging
from typing import Any

from docsearch.config import settings
from docsearch.models import QueryMatch
from docsearch.store.base import VectorStoreBase

logger = logging.getLogger(__name__)

RETURN_FIELDS = ["url", "content"]


class RetrievalService:
    """Runs one similarity query per prompt and reports the ranked matches.

    Parameters
    ----------
    store:
        Backend to query.
    collection:
        Collection to search.
    min_certainty:
        Threshold handed to the store.  Filtering happens store-side;
        results are never re-filtered or re-sorted here.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        *,
        collection: str = settings.collection_name,
        min_certainty: float = settings.min_certainty,
    ) -> None:
        self._store = store
        self.collection = collection
        self.min_certainty = min_certainty

    # -- public API -----------------------------------------------------------

    def search(self, prompt_text: str) -> list[QueryMatch]:
        """Return the pages relevant to *prompt_text*, in store order.

        An empty list means nothing reached the threshold.  Store failures
        raise :class:`~docsearch.errors.QueryError`.
        """
        logger.debug("Near-text query: %s", prompt_text)
        raw_hits = self._store.near_text(
            self.collection,
            [prompt_text],
            certainty=self.min_certainty,
            fields=RETURN_FIELDS,
        )
        return self._to_matches(raw_hits)

    @staticmethod
    def report(prompt_text: str, matches: list[QueryMatch]) -> str:
        """Render *matches* for the console, ranked from 1."""
        lines = [f"Searching for relevant documentation based on prompt: {prompt_text}"]
        if not matches:
            lines.append(f"No relevant documentation found for: {prompt_text}")
            return "\n".join(lines)

        lines.append(f'Found {len(matches)} relevant documentation link(s) for prompt: "{prompt_text}"')
        for rank, match in enumerate(matches, start=1):
            lines.append(f" {rank}. URL: {match.url}")
            lines.append(f"    Certainty: {match.certainty:.2f}")
            lines.append("")
        return "\n".join(lines)

    # -- internals ------------------------------------------------------------

    @staticmethod
    def _to_matches(raw_hits: list[dict[str, Any]]) -> list[QueryMatch]:
        return [
            QueryMatch(
                url=hit.get("url") or "",
                content=hit.get("content") or "",
                certainty=hit["certainty"],
            )
            for hit in raw_hits
        ]
