"""Exception hierarchy for docsearch.

Only per-URL fetch failures are isolated (see
:class:`~docsearch.ingestion.fetcher.PageFetcher`); every other error
type propagates up to the CLI, which logs it and exits non-zero.
"""

from __future__ import annotations


class DocSearchError(Exception):
    """Base class for all docsearch failures."""


class FetchError(DocSearchError):
    """A single page could not be downloaded.

    Never raised out of :class:`PageFetcher`; its message travels in
    :attr:`FetchResult.error` instead.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch content from {url}: {reason}")
        self.url = url
        self.reason = reason


class SchemaError(DocSearchError):
    """Deleting or creating a collection failed."""


class StoreWriteError(DocSearchError):
    """Inserting a record into the vector store failed."""


class QueryError(DocSearchError):
    """A similarity query against the vector store failed."""


class StoreUnavailableError(DocSearchError):
    """The vector store did not pass its readiness check."""
