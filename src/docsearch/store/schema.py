"""Collection schema declaration and the destructive schema reset."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field

from docsearch.config import settings
from docsearch.store.base import VectorStoreBase

logger = logging.getLogger(__name__)


class PropertySpec(BaseModel):
    """A typed field of a collection.

    ``"string"`` is a short, whole-value field (a URL); ``"text"`` is long
    free text.  Both are vectorized by the store.
    """

    name: str
    data_type: Literal["string", "text"]
    description: str = ""


class CollectionSchema(BaseModel):
    """Named record type with its vectorization strategy."""

    name: str
    description: str = ""
    vectorizer: str = "text2vec-transformers"
    vector_index_type: str = "hnsw"
    properties: list[PropertySpec] = Field(default_factory=list)

    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]


def documentation_page_schema(
    name: str = settings.collection_name,
    vectorizer: str = settings.vectorizer,
) -> CollectionSchema:
    """Return the schema of the documentation-page collection."""
    return CollectionSchema(
        name=name,
        description="Documentation pages with content and URLs",
        vectorizer=vectorizer,
        vector_index_type="hnsw",
        properties=[
            PropertySpec(name="url", data_type="string", description="URL of the documentation page"),
            PropertySpec(name="content", data_type="text", description="Content of the documentation page"),
        ],
    )


DOCUMENTATION_PAGE = documentation_page_schema()


class SchemaManager:
    """Resets the store to a single, empty collection.

    Parameters
    ----------
    store:
        Backend to provision.
    schema:
        Collection to (re)create.  Defaults to :data:`DOCUMENTATION_PAGE`.
    """

    def __init__(self, store: VectorStoreBase, schema: CollectionSchema | None = None) -> None:
        self._store = store
        self.schema = schema or DOCUMENTATION_PAGE

    def reset(self) -> None:
        """Delete all collections, then create :attr:`schema`.

        Every previously ingested record is lost.  Raises
        :class:`~docsearch.errors.SchemaError` if either step fails.
        """
        self._store.delete_all_collections()
        self._store.create_collection(self.schema)
        logger.info("Schema created successfully: %s", self.schema.name)
