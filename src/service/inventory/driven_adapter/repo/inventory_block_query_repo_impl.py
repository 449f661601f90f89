from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_inventory_block_query_repo import (
    IInventoryBlockQueryRepo,
)
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.enum.inventory_enum import BlockStatus
from src.service.inventory.driven_adapter.model.inventory_block_model import InventoryBlockModel
from src.service.inventory.driven_adapter.repo.inventory_mapper import block_model_to_entity


class InventoryBlockQueryRepoImpl(IInventoryBlockQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def get_block(self, *, block_id: str) -> Optional[InventoryBlock]:
        async with self._get_session() as session:
            model = await session.get(InventoryBlockModel, block_id)
            return block_model_to_entity(model) if model is not None else None

    @Logger.io
    async def get_blocks(self, *, block_ids: Sequence[str]) -> List[InventoryBlock]:
        if not block_ids:
            return []
        async with self._get_session() as session:
            result = await session.execute(
                select(InventoryBlockModel).where(InventoryBlockModel.id.in_(list(block_ids)))
            )
            by_id = {model.id: model for model in result.scalars().all()}
        return [block_model_to_entity(by_id[block_id]) for block_id in block_ids if block_id in by_id]

    @Logger.io
    async def list_active_blocks(self, *, event_id: str) -> List[InventoryBlock]:
        async with self._get_session() as session:
            result = await session.execute(
                select(InventoryBlockModel)
                .where(
                    InventoryBlockModel.event_id == event_id,
                    InventoryBlockModel.status == BlockStatus.ACTIVE.value,
                )
                .order_by(InventoryBlockModel.blocked_at.desc(), InventoryBlockModel.id.desc())
            )
            return [block_model_to_entity(model) for model in result.scalars().all()]
