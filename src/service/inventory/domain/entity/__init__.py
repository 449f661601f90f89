"""Inventory Domain Entities"""

from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog

__all__ = ['InventoryBlock', 'InventoryLog']
