"""
Inventory Command Repository Implementation

Each method is one transaction: the state change and its audit entry commit
together or not at all.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, List

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import BlockStatus
from src.service.inventory.driven_adapter.model.event_model import EventModel
from src.service.inventory.driven_adapter.model.inventory_block_model import InventoryBlockModel
from src.service.inventory.driven_adapter.repo.inventory_mapper import (
    block_entity_to_model,
    log_entity_to_model,
)


class InventoryCommandRepoImpl(IInventoryCommandRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        async with self.session_factory() as session:
            async with session.begin():
                yield session

    @Logger.io
    async def create_blocks(self, *, blocks: List[InventoryBlock], log: InventoryLog) -> None:
        async with self._transaction() as session:
            session.add_all([block_entity_to_model(block) for block in blocks])
            session.add(log_entity_to_model(log))

    @Logger.io
    async def release_blocks(self, *, blocks: List[InventoryBlock], log: InventoryLog) -> None:
        async with self._transaction() as session:
            for block in blocks:
                result = await session.execute(
                    update(InventoryBlockModel)
                    .where(
                        InventoryBlockModel.id == block.id,
                        InventoryBlockModel.status == BlockStatus.ACTIVE.value,
                    )
                    .values(
                        status=BlockStatus.RELEASED.value,
                        released_by=block.released_by,
                        released_by_name=block.released_by_name,
                        released_at=block.released_at,
                    )
                )
                if result.rowcount != 1:  # type: ignore[attr-defined]
                    # Leaving the context manager rolls back every release above
                    raise ConflictError('Block already released')
            session.add(log_entity_to_model(log))

    @Logger.io
    async def update_event_document(
        self, *, event_id: str, document: Dict[str, Any], log: InventoryLog
    ) -> None:
        async with self._transaction() as session:
            event = await session.get(EventModel, event_id, with_for_update=True)
            if event is None:
                raise NotFoundError('Event not found')
            event.document = document
            session.add(log_entity_to_model(log))
