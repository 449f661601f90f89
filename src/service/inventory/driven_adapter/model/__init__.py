"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.inventory.driven_adapter.model.event_model import EventModel, LayoutModel
from src.service.inventory.driven_adapter.model.hold_model import SeatHoldModel, TicketHoldModel
from src.service.inventory.driven_adapter.model.inventory_block_model import InventoryBlockModel
from src.service.inventory.driven_adapter.model.inventory_log_model import InventoryLogModel
from src.service.inventory.driven_adapter.model.order_model import OrderModel

__all__ = [
    'EventModel',
    'InventoryBlockModel',
    'InventoryLogModel',
    'LayoutModel',
    'OrderModel',
    'SeatHoldModel',
    'TicketHoldModel',
]
