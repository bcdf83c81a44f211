"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. The
resource handlers depend on these protocols only, so tests can hand them
mocks or in-memory implementations.

Example:
    ```python
    from catalog.protocols import Cache, Repository
    from catalog.models import Author


    async def count_authors(repo: Repository[Author], cache: Cache) -> int:
        async def compute() -> int:
            return len(await repo.get_all())

        return await cache.get_or_compute("authors:count", 60, compute)
    ```
"""

from typing import Any, Awaitable, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for repository pattern.

    Defines the interface for data access objects that manage entities
    of type T.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def get_all(self) -> list[T]:
        """
        Get all entities, ordered by ID.

        Returns:
            List of every stored entity.
        """
        ...

    async def create(self, entity: T) -> T:
        """
        Create new entity in database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.
        """
        ...

    async def update(self, entity: T) -> T:
        """
        Update existing entity in database.

        Args:
            entity: The entity instance with updated values.

        Returns:
            The updated entity.
        """
        ...

    async def delete(self, entity: T) -> None:
        """
        Delete entity from database.

        Args:
            entity: The entity instance to delete.
        """
        ...


@runtime_checkable
class Cache(Protocol):
    """
    Protocol for the read cache used by the resource handlers.

    Values must be JSON-serializable. ``None`` is a valid cached value and
    is returned as a hit until it expires.
    """

    async def get_or_compute(
        self,
        key: str,
        ttl: int,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        Args:
            key: Cache key.
            ttl: Time-to-live in seconds for a freshly computed value.
            compute: Coroutine function producing the value on a miss.

        Returns:
            Cached or freshly computed value.
        """
        ...

    async def invalidate(self, key: str) -> None:
        """
        Drop the entry for key, if any.

        Args:
            key: Cache key to invalidate.
        """
        ...
