"""One interactive run: reset, ingest, ask, search, report."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from docsearch.ingestion.pipeline import IngestionPipeline
from docsearch.ingestion.sources import DEFAULT_PAGES
from docsearch.models import PageSource, QueryMatch
from docsearch.retrieval.retriever import RetrievalService
from docsearch.store.base import VectorStoreBase
from docsearch.store.schema import SchemaManager

logger = logging.getLogger(__name__)

PROMPT = "Enter your documentation query: "


class InteractiveSession:
    """Wires the schema reset, ingestion and retrieval around one store.

    Each step runs only after the previous one has finished, and any
    failure propagates to the caller.

    Parameters
    ----------
    store:
        Backend shared by every step.
    pages:
        Pages to ingest.  Defaults to :data:`DEFAULT_PAGES`.
    schema_manager, pipeline, retriever:
        Override the components built from *store*.
    prompt:
        Line-input function, called with the prompt string.
    output:
        Stream the report is written to.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        pages: Sequence[PageSource] = DEFAULT_PAGES,
        *,
        schema_manager: SchemaManager | None = None,
        pipeline: IngestionPipeline | None = None,
        retriever: RetrievalService | None = None,
        prompt: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.pages = list(pages)
        self._schema = schema_manager or SchemaManager(store)
        self._pipeline = pipeline or IngestionPipeline(store, collection=self._schema.schema.name)
        self._retriever = retriever or RetrievalService(store, collection=self._schema.schema.name)
        self._prompt = prompt
        self._output = output

    def run(self, query: str | None = None) -> list[QueryMatch]:
        """Execute the session; *query* skips the interactive prompt."""
        self._schema.reset()
        self._pipeline.ingest(self.pages)

        if query is None:
            query = self._prompt(PROMPT)

        matches = self._retriever.search(query)
        print(self._retriever.report(query, matches), file=self._output or sys.stdout)
        return matches
