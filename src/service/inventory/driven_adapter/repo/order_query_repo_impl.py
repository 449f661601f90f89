from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Dict, List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.inventory.driven_adapter.model.order_model import OrderModel


class OrderQueryRepoImpl(IOrderQueryRepo):
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

    @staticmethod
    def _model_to_document(model: OrderModel) -> Dict[str, Any]:
        # Row columns win over whatever the document claims
        return {
            **(model.document or {}),
            'id': model.id,
            'eventId': model.event_id,
            'status': model.status,
            'createdAt': model.created_at,
        }

    @Logger.io
    async def list_order_documents(
        self, *, event_id: str, statuses: Sequence[str]
    ) -> List[Dict[str, Any]]:
        async with self._get_session() as session:
            result = await session.execute(
                select(OrderModel).where(
                    OrderModel.event_id == event_id, OrderModel.status.in_(list(statuses))
                )
            )
            return [self._model_to_document(model) for model in result.scalars().all()]

    @Logger.io
    async def list_recent_order_documents(
        self, *, event_id: str, statuses: Sequence[str], limit: int
    ) -> List[Dict[str, Any]]:
        async with self._get_session() as session:
            result = await session.execute(
                select(OrderModel)
                .where(OrderModel.event_id == event_id, OrderModel.status.in_(list(statuses)))
                .order_by(OrderModel.created_at.desc())
                .limit(limit)
            )
            return [self._model_to_document(model) for model in result.scalars().all()]
