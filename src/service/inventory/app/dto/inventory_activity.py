from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs


SALE_ACTION = 'sale'
CUSTOMER_ACTOR_ID = 'customer'


@attrs.define(frozen=True)
class InventoryActivityEntry:
    """One line of the activity feed: an audit log entry or a sale derived from an order."""

    id: str
    event_id: str
    action: str
    type: str
    performed_by: str
    performed_by_name: str
    performed_at: Optional[datetime]
    reason: Optional[str] = None
    tier_id: Optional[str] = None
    tier_name: Optional[str] = None
    quantity: Optional[int] = None
    seat_ids: List[str] = attrs.field(factory=list)
    details: Dict[str, Any] = attrs.field(factory=dict)
