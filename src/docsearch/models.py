"""Domain models for ingested pages, store records, and query matches."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PageSource(BaseModel):
    """A page to ingest, identified only by its URL."""

    model_config = ConfigDict(frozen=True)

    url: str


class FetchResult(BaseModel):
    """Outcome of downloading a single URL.

    A successful fetch carries the response body; a failed one carries
    the error message and an empty body.  Callers decide per call site
    whether a failure is skipped or escalated.

    Attributes
    ----------
    url:
        The URL that was requested.
    body:
        Response body decoded as text (``""`` on failure).
    error:
        Human-readable failure reason, ``None`` on success.
    """

    url: str
    body: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, body: str) -> FetchResult:
        return cls(url=url, body=body)

    @classmethod
    def failure(cls, url: str, error: str) -> FetchResult:
        return cls(url=url, error=error)


class ExtractedContent(BaseModel):
    """Normalized plain text of a fetched page."""

    url: str
    text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text


class DocumentationRecord(BaseModel):
    """A page as persisted in the vector store.

    The embedding is computed and held by the store; it never appears
    here.
    """

    url: str
    content: str

    @field_validator("content")
    @classmethod
    def _content_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("DocumentationRecord content must not be empty")
        return value

    def to_properties(self) -> dict[str, str]:
        """Return the property map written to the store."""
        return {"url": self.url, "content": self.content}


class QueryMatch(BaseModel):
    """A single near-text hit, as returned by the store.

    ``certainty`` is taken verbatim; Weaviate derives it from a float32
    distance, so a near-exact match can report a value slightly above 1.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    content: str = ""
    certainty: float

    def __str__(self) -> str:  # noqa: D105
        return f"{self.url} ({self.certainty:.2f})"


class IngestionReport(BaseModel):
    """URLs written to and skipped by one ingestion run, in input order."""

    added: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.added) + len(self.skipped)
