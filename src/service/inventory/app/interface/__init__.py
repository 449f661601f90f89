"""Inventory repository ports"""

from src.service.inventory.app.interface.i_event_config_query_repo import IEventConfigQueryRepo
from src.service.inventory.app.interface.i_hold_query_repo import IHoldQueryRepo
from src.service.inventory.app.interface.i_inventory_block_query_repo import (
    IInventoryBlockQueryRepo,
)
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.app.interface.i_inventory_log_query_repo import IInventoryLogQueryRepo
from src.service.inventory.app.interface.i_order_query_repo import IOrderQueryRepo

__all__ = [
    'IEventConfigQueryRepo',
    'IHoldQueryRepo',
    'IInventoryBlockQueryRepo',
    'IInventoryCommandRepo',
    'IInventoryLogQueryRepo',
    'IOrderQueryRepo',
]
