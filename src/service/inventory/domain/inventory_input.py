"""
Inventory Input Adapter

Event, layout and order documents come from several generations of the
ticketing front end and use different field names for the same thing.
Everything here turns those raw documents into one canonical shape so the
builders never look at a raw document.

Field aliases handled:
- event name: `name`, `basics.name`
- seating signals: `seatingType`, `layoutType`, `layoutId` (top level or under `venue`)
- tier capacity: `capacity` / `available` / `quantity` (ticket types),
  `capacity` / `quantity` / `available` (pricing tiers)
- flat capacity: `totalCapacity`, `ticketsAvailable`
- sold seats: `items[].seatInfo` and `tickets[].seatInfo`
"""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import attrs

from src.service.inventory.domain.enum.inventory_enum import SeatingType
from src.service.inventory.domain.seating_classifier import classify_seating
from src.service.inventory.domain.value_object.seat_ref import build_seat_id, is_full_seat_id


UNTITLED_EVENT = 'Untitled Event'
GENERAL_TIER_ID = 'general'
GENERAL_TIER_NAME = 'General Admission'


class TierSource(StrEnum):
    TICKET_TYPE = 'ticket_type'
    PRICING_TIER = 'pricing_tier'


@attrs.define(frozen=True)
class TierDefinition:
    tier_id: str
    name: str
    capacity: int
    source: TierSource


@attrs.define(frozen=True)
class LayoutSeat:
    seat_id: str
    number: str
    price: Optional[float] = None
    category: Optional[str] = None


@attrs.define(frozen=True)
class LayoutRow:
    label: str
    seats: List[LayoutSeat] = attrs.field(factory=list)
    price: Optional[float] = None
    category: Optional[str] = None


@attrs.define(frozen=True)
class LayoutSection:
    section_id: str
    name: str
    rows: List[LayoutRow] = attrs.field(factory=list)
    price: Optional[float] = None
    category: Optional[str] = None


@attrs.define(frozen=True)
class EventInventoryConfig:
    event_id: str
    name: str
    seating_type: SeatingType
    tiers: List[TierDefinition]
    flat_capacity: int
    tier_aliases: List[Tuple[str, str]] = attrs.field(factory=list)
    venue_id: Optional[str] = None
    venue_name: Optional[str] = None
    layout_id: Optional[str] = None
    snapshot_sections: List[LayoutSection] = attrs.field(factory=list)


@attrs.define(frozen=True)
class OrderLine:
    """A GA quantity against a tier reference. Seat lines become `OrderRecord.seat_ids`."""

    tier_ref: str
    quantity: int


@attrs.define(frozen=True)
class OrderRecord:
    order_id: str
    status: str
    ga_lines: List[OrderLine] = attrs.field(factory=list)
    seat_ids: List[str] = attrs.field(factory=list)
    created_at: Optional[datetime] = None
    order_number: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    total: Optional[float] = None
    item_count: int = 0


# ============================================================================
# Primitive coercion
# ============================================================================


def _first(*values: Any) -> Any:
    """First truthy value, mirroring how the front end falls through aliases."""
    for value in values:
        if value:
            return value
    return None


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            return 0
    return 0


def _as_price(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_category(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _as_str(value: Any) -> Optional[str]:
    if value is None or value == '':
        return None
    return str(value)


def _dicts(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Timestamps arrive as datetimes, ISO strings or epoch milliseconds."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


# ============================================================================
# Event config
# ============================================================================


def normalize_tiers(
    document: Mapping[str, Any],
) -> Tuple[List[TierDefinition], List[Tuple[str, str]]]:
    """
    Merge ticket types and pricing tiers into one list keyed by tier id.

    Ticket types win on id conflicts. Pricing tiers without an id are keyed
    as `tier-{name}`. Also returns every (tier_id, name) alias pair in
    registration order; a pricing tier that loses an id conflict still
    contributes its name.
    """
    tiers: Dict[str, TierDefinition] = {}
    aliases: List[Tuple[str, str]] = []

    for ticket_type in _dicts(document.get('ticketTypes')):
        tier_id = _as_str(ticket_type.get('id')) or _as_str(ticket_type.get('name'))
        if tier_id is None:
            continue
        tiers[tier_id] = TierDefinition(
            tier_id=tier_id,
            name=_as_str(ticket_type.get('name')) or tier_id,
            capacity=as_int(
                _first(
                    ticket_type.get('capacity'),
                    ticket_type.get('available'),
                    ticket_type.get('quantity'),
                )
            ),
            source=TierSource.TICKET_TYPE,
        )
        aliases.append((tier_id, tiers[tier_id].name))

    pricing = _mapping(document.get('pricing'))
    for pricing_tier in _dicts(pricing.get('tiers')):
        name = _as_str(pricing_tier.get('name'))
        tier_id = _as_str(pricing_tier.get('id')) or (f'tier-{name}' if name else None)
        if tier_id is None:
            continue
        aliases.append((tier_id, name or tier_id))
        if tier_id in tiers:
            continue
        tiers[tier_id] = TierDefinition(
            tier_id=tier_id,
            name=name or tier_id,
            capacity=as_int(
                _first(
                    pricing_tier.get('capacity'),
                    pricing_tier.get('quantity'),
                    pricing_tier.get('available'),
                )
            ),
            source=TierSource.PRICING_TIER,
        )

    return list(tiers.values()), aliases


def flat_capacity(document: Mapping[str, Any]) -> int:
    return as_int(_first(document.get('totalCapacity'), document.get('ticketsAvailable')))


def layout_id_of(document: Mapping[str, Any]) -> Optional[str]:
    venue = _mapping(document.get('venue'))
    return _as_str(_first(document.get('layoutId'), venue.get('layoutId')))


def normalize_event(*, event_id: str, document: Mapping[str, Any]) -> EventInventoryConfig:
    venue = _mapping(document.get('venue'))
    basics = _mapping(document.get('basics'))
    tiers, tier_aliases = normalize_tiers(document)
    return EventInventoryConfig(
        event_id=event_id,
        name=_first(document.get('name'), basics.get('name')) or UNTITLED_EVENT,
        seating_type=classify_seating(document),
        tiers=tiers,
        flat_capacity=flat_capacity(document),
        tier_aliases=tier_aliases,
        venue_id=_as_str(_first(venue.get('id'), document.get('venueId'))),
        venue_name=_as_str(_first(venue.get('name'), document.get('venueName'))),
        layout_id=layout_id_of(document),
        snapshot_sections=normalize_sections(venue.get('availableSections')),
    )


# ============================================================================
# Layout
# ============================================================================


def _normalize_seat(
    seat: Mapping[str, Any], *, section_id: str, row_label: str
) -> LayoutSeat:
    raw_id = seat.get('id')
    number = str(_first(seat.get('number'), seat.get('label'), raw_id) or '')
    seat_id = (
        raw_id
        if is_full_seat_id(raw_id)
        else build_seat_id(section_id=section_id, row=row_label, seat_number=number)
    )
    return LayoutSeat(
        seat_id=seat_id,
        number=number,
        price=_as_price(seat.get('price')),
        category=_as_category(seat.get('category')),
    )


def _normalize_row(row: Mapping[str, Any], *, section_id: str) -> LayoutRow:
    label = str(_first(row.get('label'), row.get('id')) or '')
    return LayoutRow(
        label=label,
        seats=[
            _normalize_seat(seat, section_id=section_id, row_label=label)
            for seat in _dicts(row.get('seats'))
        ],
        price=_as_price(row.get('price')),
        category=_as_category(row.get('category')),
    )


def normalize_sections(raw_sections: Any) -> List[LayoutSection]:
    sections: List[LayoutSection] = []
    for section in _dicts(raw_sections):
        section_id = str(_first(section.get('sectionId'), section.get('id')) or '')
        sections.append(
            LayoutSection(
                section_id=section_id,
                name=str(_first(section.get('sectionName'), section.get('name')) or section_id),
                rows=[_normalize_row(row, section_id=section_id) for row in _dicts(section.get('rows'))],
                price=_as_price(_first_present(section.get('basePrice'), section.get('price'))),
                category=_as_category(
                    _first(section.get('category'), section.get('priceCategories'))
                ),
            )
        )
    return sections


def normalize_layout(document: Optional[Mapping[str, Any]]) -> Optional[List[LayoutSection]]:
    """Sections of a layout document, or None when no usable layout exists."""
    if not document or 'sections' not in document:
        return None
    return normalize_sections(document.get('sections'))


# ============================================================================
# Orders
# ============================================================================


def _seat_id_from_info(seat_info: Mapping[str, Any]) -> str:
    return build_seat_id(
        section_id=seat_info.get('sectionId'),
        row=seat_info.get('row'),
        seat_number=_first(seat_info.get('seat'), seat_info.get('number')),
    )


def normalize_order(document: Mapping[str, Any]) -> OrderRecord:
    ga_lines: List[OrderLine] = []
    seat_ids: List[str] = []

    items = _dicts(document.get('items'))
    for item in items:
        seat_info = item.get('seatInfo')
        if seat_info:
            seat_ids.append(_seat_id_from_info(_mapping(seat_info)))
            continue
        ga_lines.append(
            OrderLine(
                tier_ref=str(_first(item.get('ticketType'), item.get('tierName')) or GENERAL_TIER_ID),
                quantity=as_int(item.get('quantity')) or 1,
            )
        )

    for ticket in _dicts(document.get('tickets')):
        seat_info = ticket.get('seatInfo')
        if seat_info:
            seat_ids.append(_seat_id_from_info(_mapping(seat_info)))

    return OrderRecord(
        order_id=str(document.get('id') or ''),
        status=str(document.get('status') or ''),
        ga_lines=ga_lines,
        seat_ids=seat_ids,
        created_at=parse_timestamp(document.get('createdAt')),
        order_number=_as_str(document.get('orderNumber')),
        customer_name=_as_str(document.get('customerName')),
        customer_email=_as_str(document.get('customerEmail')),
        total=_as_price(document.get('total')),
        item_count=len(items),
    )


def normalize_orders(documents: Iterable[Mapping[str, Any]]) -> List[OrderRecord]:
    return [normalize_order(document) for document in documents]
