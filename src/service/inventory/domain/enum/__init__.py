"""Inventory Domain Enums"""

from src.service.inventory.domain.enum.inventory_enum import (
    BlockStatus,
    InventoryLogAction,
    InventoryType,
    SeatingType,
    SeatStatus,
)

__all__ = ['BlockStatus', 'InventoryLogAction', 'InventoryType', 'SeatingType', 'SeatStatus']
