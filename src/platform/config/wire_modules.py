"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.inventory.app.command import (
    adjust_capacity_use_case,
    block_ga_tickets_use_case,
    block_seats_use_case,
    unblock_ga_tickets_use_case,
    unblock_seats_use_case,
)
from src.service.inventory.app.query import (
    get_inventory_blocks_use_case,
    get_inventory_logs_use_case,
    get_inventory_summary_use_case,
    list_inventory_activity_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    get_inventory_summary_use_case,
    get_inventory_blocks_use_case,
    get_inventory_logs_use_case,
    list_inventory_activity_use_case,
    adjust_capacity_use_case,
    block_ga_tickets_use_case,
    unblock_ga_tickets_use_case,
    block_seats_use_case,
    unblock_seats_use_case,
]
