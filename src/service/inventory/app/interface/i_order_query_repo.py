from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence


class IOrderQueryRepo(ABC):
    """Order Query Repository Interface - orders are the source of truth for sold inventory"""

    @abstractmethod
    async def list_order_documents(
        self, *, event_id: str, statuses: Sequence[str]
    ) -> List[Dict[str, Any]]:
        """Raw order documents of an event whose status is in `statuses`, each with its `id`."""
        pass

    @abstractmethod
    async def list_recent_order_documents(
        self, *, event_id: str, statuses: Sequence[str], limit: int
    ) -> List[Dict[str, Any]]:
        """Newest `limit` matching orders, newest first."""
        pass
