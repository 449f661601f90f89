from datetime import datetime
from typing import Iterable, List, Optional

from src.service.inventory.domain.aggregate.event_inventory_summary import EventInventorySummary
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.enum.inventory_enum import SeatingType
from src.service.inventory.domain.ga_inventory_builder import build_ga_inventory
from src.service.inventory.domain.inventory_input import (
    EventInventoryConfig,
    LayoutSection,
    OrderRecord,
)
from src.service.inventory.domain.reserved_inventory_builder import build_reserved_inventory
from src.service.inventory.domain.value_object.hold import SeatHold, TicketHold


def reconcile_inventory(
    *,
    config: EventInventoryConfig,
    orders: List[OrderRecord],
    ticket_holds: Iterable[TicketHold],
    seat_holds: Iterable[SeatHold],
    active_blocks: List[InventoryBlock],
    now: datetime,
    layout_sections: Optional[List[LayoutSection]] = None,
) -> EventInventorySummary:
    """Dispatch one event's normalized inputs to the builder for its seating type."""
    if config.seating_type == SeatingType.RESERVED:
        return build_reserved_inventory(
            config=config,
            layout_sections=layout_sections,
            orders=orders,
            holds=seat_holds,
            active_blocks=active_blocks,
            now=now,
        )
    return build_ga_inventory(
        config=config,
        orders=orders,
        holds=ticket_holds,
        active_blocks=active_blocks,
        now=now,
    )
