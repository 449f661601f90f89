from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_hold_query_repo import IHoldQueryRepo
from src.service.inventory.domain.inventory_input import GENERAL_TIER_ID
from src.service.inventory.domain.value_object.hold import SeatHold, TicketHold
from src.service.inventory.driven_adapter.model.hold_model import SeatHoldModel, TicketHoldModel


class HoldQueryRepoImpl(IHoldQueryRepo):
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
    async def list_ticket_holds(self, *, event_id: str) -> List[TicketHold]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketHoldModel).where(TicketHoldModel.event_id == event_id)
            )
            return [
                TicketHold(
                    event_id=model.event_id,
                    ticket_type_id=model.ticket_type_id or GENERAL_TIER_ID,
                    quantity=model.quantity or 1,
                    held_until=model.held_until,
                )
                for model in result.scalars().all()
            ]

    @Logger.io
    async def list_seat_holds(self, *, event_id: str) -> List[SeatHold]:
        async with self._get_session() as session:
            result = await session.execute(
                select(SeatHoldModel).where(SeatHoldModel.event_id == event_id)
            )
            return [
                SeatHold(
                    event_id=model.event_id,
                    seat_id=model.seat_id,
                    held_until=model.held_until,
                )
                for model in result.scalars().all()
            ]
