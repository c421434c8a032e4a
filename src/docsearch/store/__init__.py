"""
Store — vector-database access and collection provisioning.

Public surface
--------------
- :class:`VectorStoreBase` — abstract backend (subclass for other databases).
- :class:`WeaviateVectorStore` — default Weaviate backend.
- :class:`SchemaManager` — destructive reset of the documentation collection.
- :class:`CollectionSchema`, :class:`PropertySpec` — schema declarations.
"""

from docsearch.store.base import VectorStoreBase
from docsearch.store.schema import DOCUMENTATION_PAGE, CollectionSchema, PropertySpec, SchemaManager

__all__ = [
    "DOCUMENTATION_PAGE",
    "CollectionSchema",
    "PropertySpec",
    "SchemaManager",
    "VectorStoreBase",
    "WeaviateVectorStore",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import WeaviateVectorStore to avoid pulling in weaviate at import time."""
    if name == "WeaviateVectorStore":
        from docsearch.store.weaviate_store import WeaviateVectorStore

        return WeaviateVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
