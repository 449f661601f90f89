"""
Adjust Capacity Use Case

Raises or lowers the capacity of one GA tier. A decrease is checked against
a freshly built summary: capacity may never drop below sold + blocked for
the tier. The event document is rewritten and the audit entry stored in the
same transaction.
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.app.command.inventory_operation import run_inventory_operation
from src.service.inventory.app.dto.inventory_operation_result import InventoryOperationResult
from src.service.inventory.app.interface.i_event_config_query_repo import IEventConfigQueryRepo
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.app.query.get_inventory_summary_use_case import (
    GetInventorySummaryUseCase,
)
from src.service.inventory.domain.capacity_adjustment import (
    apply_capacity_change,
    ensure_above_floor,
)
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import InventoryLogAction, InventoryType
from src.service.inventory.domain.value_object.actor import Actor


class AdjustCapacityUseCase:
    def __init__(
        self,
        *,
        event_config_repo: IEventConfigQueryRepo,
        command_repo: IInventoryCommandRepo,
        summary_use_case: GetInventorySummaryUseCase,
        lock_registry: EventLockRegistry,
    ) -> None:
        self.event_config_repo = event_config_repo
        self.command_repo = command_repo
        self.summary_use_case = summary_use_case
        self.lock_registry = lock_registry
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        event_config_repo: IEventConfigQueryRepo = Depends(
            Provide[Container.event_config_query_repo]
        ),
        command_repo: IInventoryCommandRepo = Depends(Provide[Container.inventory_command_repo]),
        summary_use_case: GetInventorySummaryUseCase = Depends(GetInventorySummaryUseCase.depends),
        lock_registry: EventLockRegistry = Depends(Provide[Container.event_lock_registry]),
    ) -> Self:
        return cls(
            event_config_repo=event_config_repo,
            command_repo=command_repo,
            summary_use_case=summary_use_case,
            lock_registry=lock_registry,
        )

    @Logger.io
    async def adjust_capacity(
        self,
        *,
        event_id: str,
        tier_id: str,
        delta: int,
        reason: str,
        actor: Actor,
        notes: Optional[str] = None,
    ) -> InventoryOperationResult:
        async def body() -> InventoryOperationResult:
            async with self.lock_registry.hold(event_id=event_id):
                return await self._adjust(
                    event_id=event_id,
                    tier_id=tier_id,
                    delta=delta,
                    reason=reason,
                    actor=actor,
                    notes=notes,
                )

        return await run_inventory_operation(
            tracer=self.tracer,
            operation='adjust_capacity',
            event_id=event_id,
            failure_message='Failed to adjust capacity',
            body=body,
        )

    async def _adjust(
        self,
        *,
        event_id: str,
        tier_id: str,
        delta: int,
        reason: str,
        actor: Actor,
        notes: Optional[str],
    ) -> InventoryOperationResult:
        document = await self.event_config_repo.get_event_document(event_id=event_id)
        if document is None:
            raise NotFoundError('Event not found')

        change = apply_capacity_change(document=document, tier_id=tier_id, delta=delta)

        if not change.is_increase:
            summary = await self.summary_use_case.get_summary(event_id=event_id)
            ensure_above_floor(
                change=change,
                tier=summary.find_tier(change.tier_id),
                is_reserved=summary.is_reserved,
            )

        log = InventoryLog.record(
            event_id=event_id,
            action=(
                InventoryLogAction.ADD_CAPACITY
                if change.is_increase
                else InventoryLogAction.REMOVE_CAPACITY
            ),
            type=InventoryType.GA,
            reason=reason,
            actor=actor,
            quantity_change=delta,
            tier_id=change.tier_id,
            tier_name=change.tier_name,
            previous_value=change.previous_capacity,
            new_value=change.new_capacity,
            notes=notes,
        )
        await self.command_repo.update_event_document(
            event_id=event_id, document=change.document, log=log
        )

        direction = 'increased' if change.is_increase else 'decreased'
        Logger.base.info(
            f'✅ [CAPACITY] Tier {tier_id} of event {event_id} {direction}: '
            f'{change.previous_capacity} -> {change.new_capacity} by {actor.id}'
        )
        return InventoryOperationResult.ok(
            f'Capacity {direction} from {change.previous_capacity} to {change.new_capacity}',
            affected_count=abs(delta),
            log_id=log.id,
            previous_value=change.previous_capacity,
            new_value=change.new_capacity,
        )
