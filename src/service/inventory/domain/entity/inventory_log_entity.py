from datetime import datetime, timezone
from typing import List, Optional

import attrs
import uuid_utils

from src.service.inventory.domain.enum.inventory_enum import InventoryLogAction, InventoryType
from src.service.inventory.domain.value_object.actor import Actor


@attrs.define
class InventoryLog:
    """Append-only audit entry. One per inventory mutation."""

    id: str
    event_id: str
    action: InventoryLogAction
    type: InventoryType
    reason: str
    performed_by: str
    performed_by_name: str
    performed_at: datetime
    quantity_change: int = 0
    tier_id: Optional[str] = None
    tier_name: Optional[str] = None
    seat_ids: List[str] = attrs.field(factory=list)
    section_id: Optional[str] = None
    section_name: Optional[str] = None
    previous_value: Optional[int] = None
    new_value: Optional[int] = None
    notes: Optional[str] = None

    @classmethod
    def record(
        cls,
        *,
        event_id: str,
        action: InventoryLogAction,
        type: InventoryType,
        reason: str,
        actor: Actor,
        quantity_change: int,
        performed_at: Optional[datetime] = None,
        tier_id: Optional[str] = None,
        tier_name: Optional[str] = None,
        seat_ids: Optional[List[str]] = None,
        section_id: Optional[str] = None,
        section_name: Optional[str] = None,
        previous_value: Optional[int] = None,
        new_value: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> 'InventoryLog':
        return cls(
            id=str(uuid_utils.uuid7()),
            event_id=event_id,
            action=action,
            type=type,
            reason=reason,
            performed_by=actor.id,
            performed_by_name=actor.name,
            performed_at=performed_at or datetime.now(timezone.utc),
            quantity_change=quantity_change,
            tier_id=tier_id,
            tier_name=tier_name,
            seat_ids=list(seat_ids or []),
            section_id=section_id,
            section_name=section_name,
            previous_value=previous_value,
            new_value=new_value,
            notes=notes,
        )
