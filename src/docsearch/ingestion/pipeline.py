"""Sequential fetch → extract → write over a list of pages.

Usage::

    from docsearch.ingestion.pipeline import IngestionPipeline

    pipeline = IngestionPipeline(store)
    report = pipeline.ingest(DEFAULT_PAGES)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from docsearch.config import settings
from docsearch.ingestion.extractor import extract_text
from docsearch.ingestion.fetcher import PageFetcher
from docsearch.models import DocumentationRecord, ExtractedContent, IngestionReport, PageSource
from docsearch.store.base import VectorStoreBase

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Writes one record per non-empty page into *collection*.

    Pages are handled strictly in input order; each page's write
    finishes before the next page is fetched.  A page that fails to
    download or has no body text is skipped.  A failed write raises
    :class:`~docsearch.errors.StoreWriteError` and aborts the run.

    Parameters
    ----------
    store:
        Destination backend.
    fetcher:
        Page downloader.  Defaults to a new :class:`PageFetcher`.
    extractor:
        ``html -> text`` function.  Defaults to :func:`extract_text`.
    collection:
        Target collection name.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        fetcher: PageFetcher | None = None,
        *,
        extractor: Callable[[str], str] = extract_text,
        collection: str = settings.collection_name,
    ) -> None:
        self._store = store
        self._fetcher = fetcher or PageFetcher()
        self._extract = extractor
        self.collection = collection

    def ingest(self, pages: Iterable[PageSource]) -> IngestionReport:
        report = IngestionReport()
        for page in pages:
            if self._ingest_one(page):
                report.added.append(page.url)
            else:
                report.skipped.append(page.url)

        logger.info(
            "Documentation pages added successfully (%d added, %d skipped)",
            len(report.added),
            len(report.skipped),
        )
        return report

    def _ingest_one(self, page: PageSource) -> bool:
        result = self._fetcher.fetch(page.url)
        if not result.ok:
            # already logged by the fetcher
            return False

        content = ExtractedContent(url=page.url, text=self._extract(result.body))
        if content.is_empty:
            return False

        record = DocumentationRecord(url=content.url, content=content.text)
        self._store.insert(self.collection, record.to_properties())
        logger.debug("Stored %s (%d chars)", record.url, len(record.content))
        return True
