from datetime import datetime, timezone
from typing import Optional

import attrs

from src.service.inventory.domain.aggregate.event_inventory_summary import SeatInventory
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import (
    InventoryLogAction,
    InventoryType,
    SeatStatus,
)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


@attrs.define(frozen=True)
class InventoryLogFilter:
    action: Optional[InventoryLogAction] = None
    type: Optional[InventoryType] = None
    performed_by: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    def matches(self, log: InventoryLog) -> bool:
        if self.action and log.action != self.action:
            return False
        if self.type and log.type != self.type:
            return False
        if self.performed_by and log.performed_by != self.performed_by:
            return False
        performed_at = _as_utc(log.performed_at)
        if self.start_date and performed_at < _as_utc(self.start_date):
            return False
        if self.end_date and performed_at > _as_utc(self.end_date):
            return False
        return True


@attrs.define(frozen=True)
class SeatInventoryFilter:
    section_id: Optional[str] = None
    status: Optional[SeatStatus] = None
    row: Optional[str] = None

    def matches(self, seat: SeatInventory) -> bool:
        if self.status and seat.status != self.status:
            return False
        if self.row and seat.row != self.row:
            return False
        return True
