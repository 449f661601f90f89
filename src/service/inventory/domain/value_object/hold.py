from datetime import datetime, timezone

import attrs


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


@attrs.define(frozen=True)
class TicketHold:
    """Checkout hold on a GA quantity. Expired holds are ignored, never deleted."""

    event_id: str
    ticket_type_id: str
    quantity: int
    held_until: datetime

    def is_active(self, now: datetime) -> bool:
        return _as_utc(self.held_until) > _as_utc(now)


@attrs.define(frozen=True)
class SeatHold:
    event_id: str
    seat_id: str
    held_until: datetime

    def is_active(self, now: datetime) -> bool:
        return _as_utc(self.held_until) > _as_utc(now)
