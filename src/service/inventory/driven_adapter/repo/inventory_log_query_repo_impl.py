from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_inventory_log_query_repo import IInventoryLogQueryRepo
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.driven_adapter.model.inventory_log_model import InventoryLogModel
from src.service.inventory.driven_adapter.repo.inventory_mapper import log_model_to_entity


class InventoryLogQueryRepoImpl(IInventoryLogQueryRepo):
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
    async def list_recent_logs(self, *, event_id: str, limit: int) -> List[InventoryLog]:
        # Served by ix_inventory_log_event_id_performed_at
        async with self._get_session() as session:
            result = await session.execute(
                select(InventoryLogModel)
                .where(InventoryLogModel.event_id == event_id)
                .order_by(InventoryLogModel.performed_at.desc(), InventoryLogModel.id.desc())
                .limit(limit)
            )
            return [log_model_to_entity(model) for model in result.scalars().all()]
