from abc import ABC, abstractmethod
from typing import List

from src.service.inventory.domain.value_object.hold import SeatHold, TicketHold


class IHoldQueryRepo(ABC):
    """Checkout holds. Expired holds may still be returned; callers filter by time."""

    @abstractmethod
    async def list_ticket_holds(self, *, event_id: str) -> List[TicketHold]:
        pass

    @abstractmethod
    async def list_seat_holds(self, *, event_id: str) -> List[SeatHold]:
        pass
