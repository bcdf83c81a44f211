"""
Generic resource handler for CRUD operations over one entity type.

A resource handler orchestrates validation, persistence and the read cache
for a single entity and returns an ``OperationResult`` for every call. It
never raises: validation failures and missing rows are explicit results,
and anything unexpected is turned into a 500 result by ``handle_errors``.

Reads go through the cache. List results are cached under the list key
(e.g. ``"authors"``) and single-entity results under the entity key
(e.g. ``"author_1"``), an absent row included. Writes do not touch the
cache unless ``invalidate_on_write`` is enabled, so a read repeated within
the TTL window may return data that no longer matches the database.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from sqlmodel import SQLModel

from catalog.logging import logger
from catalog.protocols import Cache, Repository
from catalog.schemas.base import InputModel
from catalog.schemas.result import OperationResult
from catalog.settings import app_settings
from catalog.utils.error_handler import handle_errors
from catalog.utils.validation import validate_input

T = TypeVar("T", bound=SQLModel)


@dataclass(frozen=True)
class ResourceMessages:
    """Client-facing messages of one resource handler."""

    listed: str
    created: str
    fetched: str
    not_found: str
    missing: str
    updated: str
    deleted: str
    list_error: str
    save_error: str
    fetch_error: str
    update_error: str
    delete_error: str


class ResourceHandler(Generic[T]):
    """
    CRUD operations for one entity type.

    Subclasses set the model, the create/update rule sets, the cache keys
    and the messages.

    Attributes:
        repository: Data access for the entity.
        cache: Read cache shared by all handlers.
        ttl: Freshness window in seconds for cached reads.
        invalidate_on_write: Drop the list key and the entity key after
            every successful create, update or delete.
    """

    model: ClassVar[type[SQLModel]]
    create_schema: ClassVar[type[InputModel]]
    update_schema: ClassVar[type[InputModel]]
    list_cache_key: ClassVar[str]
    entity_cache_key: ClassVar[str]
    messages: ClassVar[ResourceMessages]

    def __init__(
        self,
        repository: Repository[T],
        cache: Cache,
        ttl: int | None = None,
        invalidate_on_write: bool | None = None,
    ):
        self.repository = repository
        self.cache = cache
        self.ttl = app_settings.CACHE_TTL_SECONDS if ttl is None else ttl
        self.invalidate_on_write = (
            app_settings.CACHE_INVALIDATE_ON_WRITE
            if invalidate_on_write is None
            else invalidate_on_write
        )

    def cache_key(self, id: int) -> str:
        return self.entity_cache_key.format(id=id)

    @staticmethod
    def serialize(entity: SQLModel) -> dict[str, Any]:
        """Flat JSON-ready dict of all columns, dates as ISO strings."""
        return entity.model_dump(mode="json")

    async def _invalidate(self, id: int | None) -> None:
        if not self.invalidate_on_write:
            return

        await self.cache.invalidate(self.list_cache_key)
        if id is not None:
            await self.cache.invalidate(self.cache_key(id))

    @handle_errors("list_error")
    async def list_all(self) -> OperationResult:
        """
        List every entity, ordered by id.

        Returns:
            200 result with the (possibly cached) list.
        """

        async def compute() -> list[dict[str, Any]]:
            return [self.serialize(e) for e in await self.repository.get_all()]

        data = await self.cache.get_or_compute(
            self.list_cache_key, self.ttl, compute
        )
        return OperationResult.ok(data, self.messages.listed)

    @handle_errors("save_error")
    async def create(self, payload: Any) -> OperationResult:
        """
        Validate the payload with the create rules and insert a new row.

        Args:
            payload: Decoded request body.

        Returns:
            201 result with the new entity, or 422 with the error map.
        """
        outcome = validate_input(self.create_schema, payload)
        if not outcome.is_valid:
            logger.info(
                f"Rejected {self.model.__name__} create: {outcome.errors}"
            )
            return OperationResult.invalid(outcome.errors)

        entity = await self.repository.create(
            self.model(**outcome.data.model_dump())
        )
        await self._invalidate(entity.id)
        logger.info(f"Created {self.model.__name__} {entity.id}")

        return OperationResult.created(
            self.serialize(entity), self.messages.created
        )

    @handle_errors("fetch_error")
    async def get(self, id: int) -> OperationResult:
        """
        Fetch one entity by id.

        Args:
            id: Primary key.

        Returns:
            200 result with the entity, or 404 with ``data=None``.
        """

        async def compute() -> dict[str, Any] | None:
            entity = await self.repository.get_by_id(id)
            return self.serialize(entity) if entity is not None else None

        data = await self.cache.get_or_compute(self.cache_key(id), self.ttl, compute)
        if data is None:
            return OperationResult.not_found(self.messages.not_found)

        return OperationResult.ok(data, self.messages.fetched)

    @handle_errors("update_error")
    async def update(self, id: int, payload: Any) -> OperationResult:
        """
        Apply a partial update.

        Only the fields present in the payload are assigned; the others
        keep their stored values.

        Args:
            id: Primary key.
            payload: Decoded request body.

        Returns:
            200 result with the updated entity, 422 with the error map, or
            404 when the row does not exist.
        """
        outcome = validate_input(self.update_schema, payload)
        if not outcome.is_valid:
            logger.info(
                f"Rejected {self.model.__name__} {id} update: {outcome.errors}"
            )
            return OperationResult.invalid(outcome.errors)

        entity = await self.repository.get_by_id(id)
        if entity is None:
            return OperationResult.not_found(self.messages.missing)

        for field, value in outcome.data.model_dump(exclude_unset=True).items():
            setattr(entity, field, value)

        entity = await self.repository.update(entity)
        await self._invalidate(id)
        logger.info(f"Updated {self.model.__name__} {id}")

        return OperationResult.ok(self.serialize(entity), self.messages.updated)

    @handle_errors("delete_error")
    async def delete(self, id: int) -> OperationResult:
        """
        Permanently delete one entity.

        Args:
            id: Primary key.

        Returns:
            200 result with ``data=[]``, or 404 when the row does not exist.
        """
        entity = await self.repository.get_by_id(id)
        if entity is None:
            return OperationResult.not_found(self.messages.missing)

        await self.repository.delete(entity)
        await self._invalidate(id)
        logger.info(f"Deleted {self.model.__name__} {id}")

        return OperationResult.ok([], self.messages.deleted)
