"""Abstract base class for vector-store backends.

Adding a new backend only requires subclassing :class:`VectorStoreBase`
and implementing the abstract methods.  Backends must vectorize text and
score similarity themselves; nothing above this layer ever sees an
embedding.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docsearch.store.schema import CollectionSchema


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Implementations translate their native exceptions into
    :class:`~docsearch.errors.SchemaError`,
    :class:`~docsearch.errors.StoreWriteError` and
    :class:`~docsearch.errors.QueryError`.
    """

    # -- schema ---------------------------------------------------------------

    @abstractmethod
    def delete_all_collections(self) -> None:
        """Drop every collection (and therefore every object) in the store."""
        ...

    @abstractmethod
    def create_collection(self, schema: CollectionSchema) -> None:
        """Create a collection from *schema*."""
        ...

    # -- data -----------------------------------------------------------------

    @abstractmethod
    def insert(self, collection: str, properties: dict[str, Any]) -> None:
        """Insert one object; the store vectorizes its text properties."""
        ...

    @abstractmethod
    def near_text(
        self,
        collection: str,
        concepts: list[str],
        *,
        certainty: float,
        fields: list[str],
    ) -> list[dict[str, Any]]:
        """Return objects semantically close to *concepts*.

        Each result dict **must** contain the requested *fields* plus
        ``"certainty"``.  Only objects with certainty >= *certainty* are
        returned, in the store's own ranking order.
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...

    # -- optional overrides ---------------------------------------------------

    def close(self) -> None:
        """Release the underlying connection.  No-op by default."""
