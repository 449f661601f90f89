"""Conversions between inventory entities and their SQLAlchemy rows."""

from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import (
    BlockStatus,
    InventoryLogAction,
    InventoryType,
)
from src.service.inventory.driven_adapter.model.inventory_block_model import InventoryBlockModel
from src.service.inventory.driven_adapter.model.inventory_log_model import InventoryLogModel


def block_model_to_entity(model: InventoryBlockModel) -> InventoryBlock:
    return InventoryBlock(
        id=model.id,
        event_id=model.event_id,
        type=InventoryType(model.type),
        status=BlockStatus(model.status),
        reason=model.reason,
        notes=model.notes,
        blocked_by=model.blocked_by,
        blocked_by_name=model.blocked_by_name,
        blocked_at=model.blocked_at,
        tier_id=model.tier_id,
        tier_name=model.tier_name,
        quantity=model.quantity,
        seat_id=model.seat_id,
        section_id=model.section_id,
        section_name=model.section_name,
        row=model.row,
        seat_number=model.seat_number,
        released_by=model.released_by,
        released_by_name=model.released_by_name,
        released_at=model.released_at,
    )


def block_entity_to_model(block: InventoryBlock) -> InventoryBlockModel:
    return InventoryBlockModel(
        id=block.id,
        event_id=block.event_id,
        type=block.type.value,
        status=block.status.value,
        reason=block.reason,
        notes=block.notes,
        blocked_by=block.blocked_by,
        blocked_by_name=block.blocked_by_name,
        blocked_at=block.blocked_at,
        tier_id=block.tier_id,
        tier_name=block.tier_name,
        quantity=block.quantity,
        seat_id=block.seat_id,
        section_id=block.section_id,
        section_name=block.section_name,
        row=block.row,
        seat_number=block.seat_number,
        released_by=block.released_by,
        released_by_name=block.released_by_name,
        released_at=block.released_at,
    )


def log_model_to_entity(model: InventoryLogModel) -> InventoryLog:
    return InventoryLog(
        id=model.id,
        event_id=model.event_id,
        action=InventoryLogAction(model.action),
        type=InventoryType(model.type),
        reason=model.reason,
        performed_by=model.performed_by,
        performed_by_name=model.performed_by_name,
        performed_at=model.performed_at,
        quantity_change=model.quantity_change,
        tier_id=model.tier_id,
        tier_name=model.tier_name,
        seat_ids=list(model.seat_ids or []),
        section_id=model.section_id,
        section_name=model.section_name,
        previous_value=model.previous_value,
        new_value=model.new_value,
        notes=model.notes,
    )


def log_entity_to_model(log: InventoryLog) -> InventoryLogModel:
    return InventoryLogModel(
        id=log.id,
        event_id=log.event_id,
        action=log.action.value,
        type=log.type.value,
        reason=log.reason,
        quantity_change=log.quantity_change,
        tier_id=log.tier_id,
        tier_name=log.tier_name,
        seat_ids=list(log.seat_ids),
        section_id=log.section_id,
        section_name=log.section_name,
        previous_value=log.previous_value,
        new_value=log.new_value,
        performed_by=log.performed_by,
        performed_by_name=log.performed_by_name,
        performed_at=log.performed_at,
        notes=log.notes,
    )
