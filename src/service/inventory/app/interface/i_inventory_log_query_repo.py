from abc import ABC, abstractmethod
from typing import List

from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog


class IInventoryLogQueryRepo(ABC):
    @abstractmethod
    async def list_recent_logs(self, *, event_id: str, limit: int) -> List[InventoryLog]:
        """Newest `limit` audit entries of an event, newest first."""
        pass
