"""
Ingestion: downloading pages, extracting their text, and writing them
to the vector store.
"""

from docsearch.ingestion.extractor import extract, extract_text, normalize_whitespace
from docsearch.ingestion.fetcher import PageFetcher
from docsearch.ingestion.pipeline import IngestionPipeline
from docsearch.ingestion.sources import DEFAULT_PAGES, pages_from_urls

__all__ = [
    "DEFAULT_PAGES",
    "IngestionPipeline",
    "PageFetcher",
    "extract",
    "extract_text",
    "normalize_whitespace",
    "pages_from_urls",
]
