from enum import StrEnum


class SeatingType(StrEnum):
    GENERAL = 'general'
    RESERVED = 'reserved'


class InventoryType(StrEnum):
    GA = 'ga'
    RESERVED = 'reserved'


class BlockStatus(StrEnum):
    ACTIVE = 'active'
    RELEASED = 'released'


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    SOLD = 'sold'
    BLOCKED = 'blocked'
    HELD = 'held'


class InventoryLogAction(StrEnum):
    ADD_CAPACITY = 'add_capacity'
    REMOVE_CAPACITY = 'remove_capacity'
    BLOCK = 'block'
    UNBLOCK = 'unblock'
    BULK_BLOCK = 'bulk_block'
    BULK_UNBLOCK = 'bulk_unblock'
