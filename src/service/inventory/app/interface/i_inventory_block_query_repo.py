from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock


class IInventoryBlockQueryRepo(ABC):
    @abstractmethod
    async def get_block(self, *, block_id: str) -> Optional[InventoryBlock]:
        pass

    @abstractmethod
    async def get_blocks(self, *, block_ids: Sequence[str]) -> List[InventoryBlock]:
        """Blocks that exist among `block_ids`, in request order. Missing ids are omitted."""
        pass

    @abstractmethod
    async def list_active_blocks(self, *, event_id: str) -> List[InventoryBlock]:
        """Active blocks of an event, newest first."""
        pass
