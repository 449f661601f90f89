"""
Capacity Adjustment

Locates a GA tier in the raw event document and writes a new capacity into
it. Lookup order:
1. ticket types, by id
2. pricing tiers, by id, or by `tier-{name}` when the tier has no id
3. the synthetic `general` tier, backed by the event's flat capacity. Only
   events without any tiers expose it.

Every capacity alias of the located record is rewritten so readers that
prefer a different alias see the same number.
"""

import copy
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

import attrs

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.inventory.domain.aggregate.event_inventory_summary import GATierInventory
from src.service.inventory.domain.inventory_input import (
    GENERAL_TIER_ID,
    GENERAL_TIER_NAME,
    as_int,
    flat_capacity,
    normalize_tiers,
)


TICKET_TYPE_CAPACITY_FIELDS = ('capacity', 'available', 'quantity')
PRICING_TIER_CAPACITY_FIELDS = ('capacity', 'quantity', 'available')
FLAT_CAPACITY_FIELDS = ('totalCapacity', 'ticketsAvailable')


@attrs.define(frozen=True)
class CapacityChange:
    tier_id: str
    tier_name: str
    previous_capacity: int
    new_capacity: int
    delta: int
    document: Dict[str, Any]

    @property
    def is_increase(self) -> bool:
        return self.delta > 0


def _read_capacity(record: Mapping[str, Any], fields: Tuple[str, ...]) -> int:
    for field in fields:
        if record.get(field):
            return as_int(record[field])
    return 0


def _write_capacity(record: MutableMapping[str, Any], fields: Tuple[str, ...], value: int) -> None:
    for field in fields:
        record[field] = value


def _records(container: Any) -> List[MutableMapping[str, Any]]:
    if not isinstance(container, list):
        return []
    return [item for item in container if isinstance(item, MutableMapping)]


def _locate_tier(
    document: Dict[str, Any], tier_id: str
) -> Optional[Tuple[MutableMapping[str, Any], Tuple[str, ...], str]]:
    for ticket_type in _records(document.get('ticketTypes')):
        ticket_type_id = ticket_type.get('id') or ticket_type.get('name')
        if ticket_type_id is not None and str(ticket_type_id) == tier_id:
            return ticket_type, TICKET_TYPE_CAPACITY_FIELDS, str(ticket_type.get('name') or tier_id)

    pricing = document.get('pricing')
    if isinstance(pricing, MutableMapping):
        for pricing_tier in _records(pricing.get('tiers')):
            name = pricing_tier.get('name')
            # Same keying as normalize_tiers: a real id hides the generated one
            pricing_tier_id = pricing_tier.get('id') or (f'tier-{name}' if name else None)
            if pricing_tier_id is not None and str(pricing_tier_id) == tier_id:
                return pricing_tier, PRICING_TIER_CAPACITY_FIELDS, str(name or tier_id)

    if tier_id == GENERAL_TIER_ID and not normalize_tiers(document)[0]:
        return document, FLAT_CAPACITY_FIELDS, GENERAL_TIER_NAME

    return None


def _current_capacity(record: Mapping[str, Any], fields: Tuple[str, ...]) -> int:
    if fields == FLAT_CAPACITY_FIELDS:
        return flat_capacity(record)
    return _read_capacity(record, fields)


def apply_capacity_change(
    *, document: Mapping[str, Any], tier_id: str, delta: int
) -> CapacityChange:
    """
    Compute the new capacity and return an updated copy of the event document.

    Raises:
        DomainError: zero delta or a negative resulting capacity
        NotFoundError: no tier matches `tier_id`
    """
    if delta == 0:
        raise DomainError('Adjustment cannot be zero')

    updated = copy.deepcopy(dict(document))
    located = _locate_tier(updated, tier_id)
    if located is None:
        raise NotFoundError('Tier not found')

    record, fields, tier_name = located
    previous_capacity = _current_capacity(record, fields)
    new_capacity = previous_capacity + delta
    if new_capacity < 0:
        raise DomainError('New capacity cannot be negative')

    _write_capacity(record, fields, new_capacity)
    return CapacityChange(
        tier_id=tier_id,
        tier_name=tier_name,
        previous_capacity=previous_capacity,
        new_capacity=new_capacity,
        delta=delta,
        document=updated,
    )


def ensure_above_floor(
    *, change: CapacityChange, tier: Optional[GATierInventory], is_reserved: bool = False
) -> None:
    """
    Capacity may not drop below what is already sold or blocked on the tier.

    Reserved events have no GA tiers in their summary, so a missing tier only
    passes for them. On a GA event it means the summary cannot vouch for the
    floor and the decrease is refused.

    Raises:
        DomainError: the new capacity is below sold + blocked
        NotFoundError: GA event whose summary has no tier for the change
    """
    if change.delta > 0:
        return
    if tier is None:
        if is_reserved:
            return
        raise NotFoundError('Tier not found')
    floor = tier.sold + tier.blocked
    if change.new_capacity < floor:
        raise DomainError(
            f'Cannot reduce capacity below {floor} (sold: {tier.sold}, blocked: {tier.blocked})'
        )
