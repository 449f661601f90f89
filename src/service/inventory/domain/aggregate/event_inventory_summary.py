"""
Event Inventory Summary - derived read model

[Business Invariants]
- available = max(0, capacity - sold - blocked - held) for every tier and section
- each seat has exactly one status, precedence sold > blocked > held > available

Never persisted. Rebuilt from source data on every request.
"""

from typing import Iterator, List, Optional

import attrs

from src.service.inventory.domain.enum.inventory_enum import SeatingType, SeatStatus


def compute_available(*, capacity: int, sold: int, blocked: int, held: int) -> int:
    return max(0, capacity - sold - blocked - held)


@attrs.define
class GATierInventory:
    tier_id: str
    tier_name: str
    capacity: int
    sold: int
    blocked: int
    held: int
    available: int


@attrs.define
class SeatInventory:
    seat_id: str
    section_id: str
    section_name: str
    row: str
    seat_number: str
    status: SeatStatus
    block_reason: Optional[str] = None
    block_id: Optional[str] = None
    price: Optional[float] = None
    price_category: Optional[str] = None


@attrs.define
class SectionInventory:
    section_id: str
    section_name: str
    total_seats: int
    sold: int
    blocked: int
    held: int
    available: int
    seats: List[SeatInventory] = attrs.field(factory=list)


@attrs.define
class EventInventorySummary:
    event_id: str
    event_name: str
    seating_type: SeatingType
    total_capacity: int
    total_sold: int
    total_blocked: int
    total_held: int
    total_available: int
    venue_id: Optional[str] = None
    venue_name: Optional[str] = None
    layout_id: Optional[str] = None
    ga_tiers: List[GATierInventory] = attrs.field(factory=list)
    sections: List[SectionInventory] = attrs.field(factory=list)

    @property
    def is_reserved(self) -> bool:
        return self.seating_type == SeatingType.RESERVED

    def find_tier(self, tier_id: str) -> Optional[GATierInventory]:
        return next((tier for tier in self.ga_tiers if tier.tier_id == tier_id), None)

    def find_section(self, section_id: str) -> Optional[SectionInventory]:
        return next(
            (section for section in self.sections if section.section_id == section_id), None
        )

    def iter_seats(self) -> Iterator[SeatInventory]:
        for section in self.sections:
            yield from section.seats

    def find_seat(self, seat_id: str) -> Optional[SeatInventory]:
        return next((seat for seat in self.iter_seats() if seat.seat_id == seat_id), None)
