from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.app.command.inventory_operation import run_inventory_operation
from src.service.inventory.app.dto.inventory_operation_result import InventoryOperationResult
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.app.query.get_inventory_summary_use_case import (
    GetInventorySummaryUseCase,
)
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import InventoryLogAction, InventoryType
from src.service.inventory.domain.value_object.actor import Actor


class BlockGATicketsUseCase:
    """
    Withhold a quantity of one GA tier from sale.

    The availability check and the write run under the event lock, so two
    blocks on the same event cannot both pass against the same summary.
    """

    def __init__(
        self,
        *,
        command_repo: IInventoryCommandRepo,
        summary_use_case: GetInventorySummaryUseCase,
        lock_registry: EventLockRegistry,
    ) -> None:
        self.command_repo = command_repo
        self.summary_use_case = summary_use_case
        self.lock_registry = lock_registry
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        command_repo: IInventoryCommandRepo = Depends(Provide[Container.inventory_command_repo]),
        summary_use_case: GetInventorySummaryUseCase = Depends(GetInventorySummaryUseCase.depends),
        lock_registry: EventLockRegistry = Depends(Provide[Container.event_lock_registry]),
    ) -> Self:
        return cls(
            command_repo=command_repo,
            summary_use_case=summary_use_case,
            lock_registry=lock_registry,
        )

    @Logger.io
    async def block_tickets(
        self,
        *,
        event_id: str,
        tier_id: str,
        quantity: int,
        reason: str,
        actor: Actor,
        notes: Optional[str] = None,
    ) -> InventoryOperationResult:
        async def body() -> InventoryOperationResult:
            async with self.lock_registry.hold(event_id=event_id):
                return await self._block(
                    event_id=event_id,
                    tier_id=tier_id,
                    quantity=quantity,
                    reason=reason,
                    actor=actor,
                    notes=notes,
                )

        return await run_inventory_operation(
            tracer=self.tracer,
            operation='block_ga',
            event_id=event_id,
            failure_message='Failed to block tickets',
            body=body,
        )

    async def _block(
        self,
        *,
        event_id: str,
        tier_id: str,
        quantity: int,
        reason: str,
        actor: Actor,
        notes: Optional[str],
    ) -> InventoryOperationResult:
        if quantity < 1:
            raise DomainError('Quantity must be at least 1')

        summary = await self.summary_use_case.get_summary(event_id=event_id)
        tier = summary.find_tier(tier_id)
        if tier is None:
            raise NotFoundError('Tier not found')
        if quantity > tier.available:
            raise DomainError(f'Only {tier.available} tickets available to block')

        block = InventoryBlock.create_ga(
            event_id=event_id,
            tier_id=tier.tier_id,
            tier_name=tier.tier_name,
            quantity=quantity,
            reason=reason,
            actor=actor,
            notes=notes,
        )
        log = InventoryLog.record(
            event_id=event_id,
            action=InventoryLogAction.BLOCK,
            type=InventoryType.GA,
            reason=reason,
            actor=actor,
            quantity_change=quantity,
            performed_at=block.blocked_at,
            tier_id=tier.tier_id,
            tier_name=tier.tier_name,
            notes=notes,
        )
        await self.command_repo.create_blocks(blocks=[block], log=log)

        metrics.record_blocked(inventory_type=InventoryType.GA.value, quantity=quantity)
        Logger.base.info(
            f'🔒 [BLOCK-GA] Blocked {quantity} x {tier.tier_name} for event {event_id} '
            f'(block={block.id}, available {tier.available} -> {tier.available - quantity})'
        )
        return InventoryOperationResult.ok(
            f'Blocked {quantity} tickets',
            affected_count=quantity,
            log_id=log.id,
            block_ids=[block.id],
        )
