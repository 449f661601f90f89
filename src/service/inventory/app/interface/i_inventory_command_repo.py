"""
Inventory Command Repository Interface

Every write stores its state change and its audit entry in one transaction.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog


class IInventoryCommandRepo(ABC):
    @abstractmethod
    async def create_blocks(self, *, blocks: List[InventoryBlock], log: InventoryLog) -> None:
        """Insert all blocks as one group together with the audit entry."""
        pass

    @abstractmethod
    async def release_blocks(self, *, blocks: List[InventoryBlock], log: InventoryLog) -> None:
        """
        Persist released blocks together with the audit entry.

        The release is conditional on every block still being active in the
        store.

        Raises:
            ConflictError: a block was released by someone else in the meantime
        """
        pass

    @abstractmethod
    async def update_event_document(
        self, *, event_id: str, document: Dict[str, Any], log: InventoryLog
    ) -> None:
        pass
