"""
GA Inventory Builder

Per-tier counts for quantity-based (general admission) inventory.

Sold and held quantities are keyed through the tier alias resolver. A tier's
sold count adds the amount resolved to its id and the amount keyed by its
display name. Both lookups are kept even though they can overlap, for
example when a tier's name equals its id.
"""

from collections import Counter
from datetime import datetime
from typing import Iterable, List

from src.service.inventory.domain.aggregate.event_inventory_summary import (
    EventInventorySummary,
    GATierInventory,
    compute_available,
)
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.enum.inventory_enum import InventoryType, SeatingType
from src.service.inventory.domain.inventory_input import (
    GENERAL_TIER_ID,
    GENERAL_TIER_NAME,
    EventInventoryConfig,
    OrderRecord,
)
from src.service.inventory.domain.value_object.hold import TicketHold
from src.service.inventory.domain.value_object.tier_alias_resolver import TierAliasResolver


def build_ga_inventory(
    *,
    config: EventInventoryConfig,
    orders: Iterable[OrderRecord],
    holds: Iterable[TicketHold],
    active_blocks: Iterable[InventoryBlock],
    now: datetime,
) -> EventInventorySummary:
    resolver = TierAliasResolver.from_tiers(config.tier_aliases)

    sold_counts: Counter[str] = Counter()
    for order in orders:
        for line in order.ga_lines:
            sold_counts[resolver.resolve(line.tier_ref)] += line.quantity

    held_counts: Counter[str] = Counter()
    for hold in holds:
        if hold.is_active(now):
            held_counts[resolver.resolve(hold.ticket_type_id or GENERAL_TIER_ID)] += hold.quantity

    blocked_counts: Counter[str] = Counter()
    for block in active_blocks:
        if block.type == InventoryType.GA and block.is_active and block.tier_id:
            blocked_counts[block.tier_id] += block.quantity or 0

    ga_tiers: List[GATierInventory] = []
    for tier in config.tiers:
        sold = sold_counts[tier.tier_id] + sold_counts[tier.name]
        held = held_counts[tier.tier_id] + held_counts[tier.name]
        blocked = blocked_counts[tier.tier_id]
        ga_tiers.append(
            GATierInventory(
                tier_id=tier.tier_id,
                tier_name=tier.name,
                capacity=tier.capacity,
                sold=sold,
                blocked=blocked,
                held=held,
                available=compute_available(
                    capacity=tier.capacity, sold=sold, blocked=blocked, held=held
                ),
            )
        )

    # No tiers configured: one synthetic tier over the event's flat capacity
    if not ga_tiers:
        sold = sold_counts[GENERAL_TIER_ID]
        held = held_counts[GENERAL_TIER_ID]
        blocked = blocked_counts[GENERAL_TIER_ID]
        ga_tiers.append(
            GATierInventory(
                tier_id=GENERAL_TIER_ID,
                tier_name=GENERAL_TIER_NAME,
                capacity=config.flat_capacity,
                sold=sold,
                blocked=blocked,
                held=held,
                available=compute_available(
                    capacity=config.flat_capacity, sold=sold, blocked=blocked, held=held
                ),
            )
        )

    total_capacity = sum(tier.capacity for tier in ga_tiers)
    total_sold = sum(tier.sold for tier in ga_tiers)
    total_blocked = sum(tier.blocked for tier in ga_tiers)
    total_held = sum(tier.held for tier in ga_tiers)

    return EventInventorySummary(
        event_id=config.event_id,
        event_name=config.name,
        venue_id=config.venue_id,
        venue_name=config.venue_name,
        seating_type=SeatingType.GENERAL,
        total_capacity=total_capacity,
        total_sold=total_sold,
        total_blocked=total_blocked,
        total_held=total_held,
        total_available=compute_available(
            capacity=total_capacity, sold=total_sold, blocked=total_blocked, held=total_held
        ),
        ga_tiers=ga_tiers,
    )
