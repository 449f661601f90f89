from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_event_config_query_repo import IEventConfigQueryRepo
from src.service.inventory.driven_adapter.model.event_model import EventModel, LayoutModel


class EventConfigQueryRepoImpl(IEventConfigQueryRepo):
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
    async def get_event_document(self, *, event_id: str) -> Optional[Dict[str, Any]]:
        async with self._get_session() as session:
            event = await session.get(EventModel, event_id)
            return dict(event.document) if event is not None else None

    @Logger.io
    async def get_layout_document(self, *, layout_id: str) -> Optional[Dict[str, Any]]:
        async with self._get_session() as session:
            layout = await session.get(LayoutModel, layout_id)
            return dict(layout.document) if layout is not None else None
