"""Application layer DTOs"""

from src.service.inventory.app.dto.inventory_activity import InventoryActivityEntry
from src.service.inventory.app.dto.inventory_filter import InventoryLogFilter, SeatInventoryFilter
from src.service.inventory.app.dto.inventory_operation_result import (
    InventoryErrorKind,
    InventoryOperationResult,
)

__all__ = [
    'InventoryActivityEntry',
    'InventoryErrorKind',
    'InventoryLogFilter',
    'InventoryOperationResult',
    'SeatInventoryFilter',
]
