"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from docsearch.errors import QueryError, SchemaError, StoreWriteError
from docsearch.store.base import VectorStoreBase
from docsearch.store.schema import CollectionSchema


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


class FakeVectorStore(VectorStoreBase):
    """In-memory store that records every call and applies the certainty cutoff.

    ``hits`` are the canned near-text results (each with ``certainty``);
    the fake drops those below the requested threshold the way Weaviate
    does, and keeps their order.
    """

    def __init__(self, hits: list[dict[str, Any]] | None = None) -> None:
        self.collections: dict[str, CollectionSchema] = {}
        self.objects: dict[str, list[dict[str, Any]]] = {}
        self.hits: list[dict[str, Any]] = hits or []
        self.calls: list[str] = []
        self.last_query: dict[str, Any] | None = None
        self.fail_on: set[str] = set()
        self.closed = False

    def delete_all_collections(self) -> None:
        self.calls.append("delete_all_collections")
        if "delete_all_collections" in self.fail_on:
            raise SchemaError("delete failed")
        self.collections.clear()
        self.objects.clear()

    def create_collection(self, schema: CollectionSchema) -> None:
        self.calls.append("create_collection")
        if "create_collection" in self.fail_on:
            raise SchemaError("create failed")
        self.collections[schema.name] = schema
        self.objects[schema.name] = []

    def insert(self, collection: str, properties: dict[str, Any]) -> None:
        self.calls.append("insert")
        if "insert" in self.fail_on:
            raise StoreWriteError("insert failed")
        self.objects.setdefault(collection, []).append(dict(properties))

    def near_text(
        self,
        collection: str,
        concepts: list[str],
        *,
        certainty: float,
        fields: list[str],
    ) -> list[dict[str, Any]]:
        self.calls.append("near_text")
        self.last_query = {
            "collection": collection,
            "concepts": concepts,
            "certainty": certainty,
            "fields": fields,
        }
        if "near_text" in self.fail_on:
            raise QueryError("query failed")
        return [dict(h) for h in self.hits if h["certainty"] >= certainty]

    def health_check(self) -> bool:
        return True

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_store() -> FakeVectorStore:
    return FakeVectorStore()
