"""Weaviate implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

import weaviate
from weaviate.classes.config import Configure, DataType, Property, Tokenization
from weaviate.classes.query import MetadataQuery
from weaviate.exceptions import WeaviateBaseError

from docsearch.config import settings
from docsearch.errors import QueryError, SchemaError, StoreWriteError
from docsearch.store.base import VectorStoreBase
from docsearch.store.schema import CollectionSchema, PropertySpec

logger = logging.getLogger(__name__)


def _build_property(spec: PropertySpec) -> Property:
    """Convert a :class:`PropertySpec` to a Weaviate ``Property``.

    Weaviate v4 dropped the ``string`` data type; a short ``text`` field
    with whole-field tokenization is its replacement.
    """
    if spec.data_type == "string":
        return Property(
            name=spec.name,
            data_type=DataType.TEXT,
            tokenization=Tokenization.FIELD,
            description=spec.description,
        )
    return Property(name=spec.name, data_type=DataType.TEXT, description=spec.description)


def _build_vectorizer(name: str) -> Any:
    """Map a module name such as ``text2vec-transformers`` to its config."""
    factory = getattr(Configure.Vectorizer, name.replace("-", "_"), None)
    if factory is None:
        raise SchemaError(f"Unsupported vectorizer: {name!r}")
    return factory()


def _build_vector_index(index_type: str) -> Any:
    factory = getattr(Configure.VectorIndex, index_type, None)
    if factory is None:
        raise SchemaError(f"Unsupported vector index type: {index_type!r}")
    return factory()


class WeaviateVectorStore(VectorStoreBase):
    """Weaviate-backed vector store.

    Parameters
    ----------
    client:
        An already connected ``weaviate.WeaviateClient``.  When *None*, a
        local connection is opened from *host*, *port* and *grpc_port*.
    host:
        Weaviate hostname.
    port:
        Weaviate REST port.
    grpc_port:
        Weaviate gRPC port (used by v4 queries).
    """

    def __init__(
        self,
        client: weaviate.WeaviateClient | None = None,
        *,
        host: str = settings.weaviate_host,
        port: int = settings.weaviate_port,
        grpc_port: int = settings.weaviate_grpc_port,
    ) -> None:
        if client is None:
            logger.info("Connecting to Weaviate at %s:%d (gRPC %d)", host, port, grpc_port)
            client = weaviate.connect_to_local(host=host, port=port, grpc_port=grpc_port)
        self._client = client

    # -- VectorStoreBase overrides --------------------------------------------

    def delete_all_collections(self) -> None:
        try:
            self._client.collections.delete_all()
        except WeaviateBaseError as exc:
            raise SchemaError(f"Failed to delete collections: {exc}") from exc

    def create_collection(self, schema: CollectionSchema) -> None:
        vectorizer = _build_vectorizer(schema.vectorizer)
        vector_index = _build_vector_index(schema.vector_index_type)
        try:
            self._client.collections.create(
                name=schema.name,
                description=schema.description,
                vectorizer_config=vectorizer,
                vector_index_config=vector_index,
                properties=[_build_property(p) for p in schema.properties],
            )
        except WeaviateBaseError as exc:
            raise SchemaError(f"Failed to create collection {schema.name!r}: {exc}") from exc

    def insert(self, collection: str, properties: dict[str, Any]) -> None:
        try:
            self._client.collections.get(collection).data.insert(properties=properties)
        except WeaviateBaseError as exc:
            raise StoreWriteError(f"Failed to insert into {collection!r}: {exc}") from exc

    def near_text(
        self,
        collection: str,
        concepts: list[str],
        *,
        certainty: float,
        fields: list[str],
    ) -> list[dict[str, Any]]:
        try:
            response = self._client.collections.get(collection).query.near_text(
                query=concepts,
                certainty=certainty,
                return_properties=fields,
                return_metadata=MetadataQuery(certainty=True),
            )
        except WeaviateBaseError as exc:
            raise QueryError(f"Near-text query on {collection!r} failed: {exc}") from exc

        hits: list[dict[str, Any]] = []
        for obj in response.objects:
            hit = {name: obj.properties.get(name) for name in fields}
            hit["certainty"] = obj.metadata.certainty
            hits.append(hit)
        return hits

    def health_check(self) -> bool:
        try:
            return bool(self._client.is_ready())
        except Exception:
            logger.warning("Weaviate health-check failed", exc_info=True)
            return False

    def close(self) -> None:
        self._client.close()
