from datetime import datetime, timezone
from typing import Optional

import attrs
import uuid_utils

from src.platform.exception.exceptions import DomainError
from src.service.inventory.domain.enum.inventory_enum import BlockStatus, InventoryType
from src.service.inventory.domain.value_object.actor import Actor


@attrs.define
class InventoryBlock:
    """
    Admin-held inventory, either a GA quantity on one tier or a single seat.

    A block is created active and released at most once. Released blocks are
    kept for history and never re-activated.
    """

    id: str
    event_id: str
    type: InventoryType
    reason: str
    blocked_by: str
    blocked_by_name: str
    blocked_at: datetime
    status: BlockStatus = BlockStatus.ACTIVE
    notes: Optional[str] = None

    # GA
    tier_id: Optional[str] = None
    tier_name: Optional[str] = None
    quantity: Optional[int] = None

    # Reserved
    seat_id: Optional[str] = None
    section_id: Optional[str] = None
    section_name: Optional[str] = None
    row: Optional[str] = None
    seat_number: Optional[str] = None

    released_by: Optional[str] = None
    released_by_name: Optional[str] = None
    released_at: Optional[datetime] = None

    @classmethod
    def create_ga(
        cls,
        *,
        event_id: str,
        tier_id: str,
        tier_name: str,
        quantity: int,
        reason: str,
        actor: Actor,
        notes: Optional[str] = None,
        blocked_at: Optional[datetime] = None,
    ) -> 'InventoryBlock':
        if quantity < 1:
            raise DomainError('Quantity must be at least 1')
        return cls(
            id=str(uuid_utils.uuid7()),
            event_id=event_id,
            type=InventoryType.GA,
            reason=reason,
            notes=notes,
            blocked_by=actor.id,
            blocked_by_name=actor.name,
            blocked_at=blocked_at or datetime.now(timezone.utc),
            tier_id=tier_id,
            tier_name=tier_name,
            quantity=quantity,
        )

    @classmethod
    def create_seat(
        cls,
        *,
        event_id: str,
        seat_id: str,
        section_id: str,
        section_name: str,
        row: str,
        seat_number: str,
        reason: str,
        actor: Actor,
        notes: Optional[str] = None,
        blocked_at: Optional[datetime] = None,
    ) -> 'InventoryBlock':
        return cls(
            id=str(uuid_utils.uuid7()),
            event_id=event_id,
            type=InventoryType.RESERVED,
            reason=reason,
            notes=notes,
            blocked_by=actor.id,
            blocked_by_name=actor.name,
            blocked_at=blocked_at or datetime.now(timezone.utc),
            seat_id=seat_id,
            section_id=section_id,
            section_name=section_name,
            row=row,
            seat_number=seat_number,
        )

    @property
    def is_active(self) -> bool:
        return self.status == BlockStatus.ACTIVE

    def release(self, *, actor: Actor, released_at: Optional[datetime] = None) -> 'InventoryBlock':
        if not self.is_active:
            raise DomainError('Block already released')
        return attrs.evolve(
            self,
            status=BlockStatus.RELEASED,
            released_by=actor.id,
            released_by_name=actor.name,
            released_at=released_at or datetime.now(timezone.utc),
        )
