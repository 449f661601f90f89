from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_inventory_block_query_repo import (
    IInventoryBlockQueryRepo,
)
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock


class GetInventoryBlocksUseCase:
    def __init__(self, *, block_query_repo: IInventoryBlockQueryRepo) -> None:
        self.block_query_repo = block_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        block_query_repo: IInventoryBlockQueryRepo = Depends(
            Provide[Container.inventory_block_query_repo]
        ),
    ) -> Self:
        return cls(block_query_repo=block_query_repo)

    @Logger.io
    async def list_active_blocks(self, *, event_id: str) -> List[InventoryBlock]:
        """Active blocks of the event, newest first."""
        return await self.block_query_repo.list_active_blocks(event_id=event_id)
