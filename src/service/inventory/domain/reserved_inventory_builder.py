"""
Reserved Seating Inventory Builder

Walks sections -> rows -> seats of the layout and assigns each seat one
status. The event's own venue section snapshot is used only when no layout
document is available; it usually has no seat detail.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set, Tuple

from src.service.inventory.domain.aggregate.event_inventory_summary import (
    EventInventorySummary,
    SeatInventory,
    SectionInventory,
    compute_available,
)
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.enum.inventory_enum import InventoryType, SeatingType, SeatStatus
from src.service.inventory.domain.inventory_input import (
    EventInventoryConfig,
    LayoutSection,
    OrderRecord,
)
from src.service.inventory.domain.value_object.hold import SeatHold


def _first_present(*values):
    return next((value for value in values if value is not None), None)


def classify_seat(
    seat_id: str,
    *,
    sold_seats: Set[str],
    blocked_seats: Dict[str, Tuple[str, str]],
    held_seats: Set[str],
) -> SeatStatus:
    """Precedence: sold > blocked > held > available."""
    if seat_id in sold_seats:
        return SeatStatus.SOLD
    if seat_id in blocked_seats:
        return SeatStatus.BLOCKED
    if seat_id in held_seats:
        return SeatStatus.HELD
    return SeatStatus.AVAILABLE


def build_reserved_inventory(
    *,
    config: EventInventoryConfig,
    layout_sections: Optional[List[LayoutSection]],
    orders: Iterable[OrderRecord],
    holds: Iterable[SeatHold],
    active_blocks: Iterable[InventoryBlock],
    now: datetime,
) -> EventInventorySummary:
    sections = layout_sections if layout_sections is not None else config.snapshot_sections

    sold_seats: Set[str] = {seat_id for order in orders for seat_id in order.seat_ids}
    held_seats: Set[str] = {hold.seat_id for hold in holds if hold.is_active(now)}
    blocked_seats: Dict[str, Tuple[str, str]] = {
        block.seat_id: (block.reason, block.id)
        for block in active_blocks
        if block.type == InventoryType.RESERVED and block.is_active and block.seat_id
    }

    section_inventories: List[SectionInventory] = []
    for section in sections:
        seats: List[SeatInventory] = []
        for row in section.rows:
            for seat in row.seats:
                status = classify_seat(
                    seat.seat_id,
                    sold_seats=sold_seats,
                    blocked_seats=blocked_seats,
                    held_seats=held_seats,
                )
                block_reason, block_id = (
                    blocked_seats[seat.seat_id] if status == SeatStatus.BLOCKED else (None, None)
                )
                seats.append(
                    SeatInventory(
                        seat_id=seat.seat_id,
                        section_id=section.section_id,
                        section_name=section.name,
                        row=row.label,
                        seat_number=seat.number,
                        status=status,
                        block_reason=block_reason,
                        block_id=block_id,
                        price=_first_present(seat.price, row.price, section.price),
                        price_category=_first_present(seat.category, row.category, section.category),
                    )
                )

        sold = sum(1 for seat in seats if seat.status == SeatStatus.SOLD)
        blocked = sum(1 for seat in seats if seat.status == SeatStatus.BLOCKED)
        held = sum(1 for seat in seats if seat.status == SeatStatus.HELD)
        section_inventories.append(
            SectionInventory(
                section_id=section.section_id,
                section_name=section.name,
                total_seats=len(seats),
                sold=sold,
                blocked=blocked,
                held=held,
                available=compute_available(capacity=len(seats), sold=sold, blocked=blocked, held=held),
                seats=seats,
            )
        )

    total_capacity = sum(section.total_seats for section in section_inventories)
    total_sold = sum(section.sold for section in section_inventories)
    total_blocked = sum(section.blocked for section in section_inventories)
    total_held = sum(section.held for section in section_inventories)

    return EventInventorySummary(
        event_id=config.event_id,
        event_name=config.name,
        venue_id=config.venue_id,
        venue_name=config.venue_name,
        layout_id=config.layout_id,
        seating_type=SeatingType.RESERVED,
        total_capacity=total_capacity,
        total_sold=total_sold,
        total_blocked=total_blocked,
        total_held=total_held,
        total_available=compute_available(
            capacity=total_capacity, sold=total_sold, blocked=total_blocked, held=total_held
        ),
        sections=section_inventories,
    )
