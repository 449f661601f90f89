"""Inventory Domain Value Objects"""

from src.service.inventory.domain.value_object.actor import Actor
from src.service.inventory.domain.value_object.hold import SeatHold, TicketHold
from src.service.inventory.domain.value_object.seat_ref import build_seat_id
from src.service.inventory.domain.value_object.tier_alias_resolver import TierAliasResolver

__all__ = ['Actor', 'SeatHold', 'TicketHold', 'TierAliasResolver', 'build_seat_id']
