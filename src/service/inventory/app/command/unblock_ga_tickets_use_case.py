from datetime import datetime, timezone
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, TypeMismatchError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.app.command.inventory_operation import run_inventory_operation
from src.service.inventory.app.dto.inventory_operation_result import InventoryOperationResult
from src.service.inventory.app.interface.i_inventory_block_query_repo import (
    IInventoryBlockQueryRepo,
)
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import InventoryLogAction, InventoryType
from src.service.inventory.domain.value_object.actor import Actor


class UnblockGATicketsUseCase:
    def __init__(
        self,
        *,
        block_query_repo: IInventoryBlockQueryRepo,
        command_repo: IInventoryCommandRepo,
        lock_registry: EventLockRegistry,
    ) -> None:
        self.block_query_repo = block_query_repo
        self.command_repo = command_repo
        self.lock_registry = lock_registry
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        block_query_repo: IInventoryBlockQueryRepo = Depends(
            Provide[Container.inventory_block_query_repo]
        ),
        command_repo: IInventoryCommandRepo = Depends(Provide[Container.inventory_command_repo]),
        lock_registry: EventLockRegistry = Depends(Provide[Container.event_lock_registry]),
    ) -> Self:
        return cls(
            block_query_repo=block_query_repo,
            command_repo=command_repo,
            lock_registry=lock_registry,
        )

    @Logger.io
    async def unblock_tickets(
        self, *, event_id: str, block_id: str, actor: Actor
    ) -> InventoryOperationResult:
        """
        Release one GA block.

        A block that is already released fails instead of being released
        twice, both here and at the store.
        """

        async def body() -> InventoryOperationResult:
            async with self.lock_registry.hold(event_id=event_id):
                return await self._unblock(event_id=event_id, block_id=block_id, actor=actor)

        return await run_inventory_operation(
            tracer=self.tracer,
            operation='unblock_ga',
            event_id=event_id,
            failure_message='Failed to unblock tickets',
            body=body,
        )

    async def _unblock(self, *, event_id: str, block_id: str, actor: Actor) -> InventoryOperationResult:
        block = await self.block_query_repo.get_block(block_id=block_id)
        if block is None:
            raise NotFoundError('Block record not found')
        if block.event_id != event_id:
            raise NotFoundError('Block does not belong to this event')
        if block.type != InventoryType.GA:
            raise TypeMismatchError('Not a GA block')

        released_at = datetime.now(timezone.utc)
        released = block.release(actor=actor, released_at=released_at)
        quantity = block.quantity or 0

        log = InventoryLog.record(
            event_id=event_id,
            action=InventoryLogAction.UNBLOCK,
            type=InventoryType.GA,
            reason=f'Released: {block.reason}',
            actor=actor,
            quantity_change=-quantity,
            performed_at=released_at,
            tier_id=block.tier_id,
            tier_name=block.tier_name,
        )
        await self.command_repo.release_blocks(blocks=[released], log=log)

        metrics.record_released(inventory_type=InventoryType.GA.value, quantity=quantity)
        Logger.base.info(
            f'🔓 [UNBLOCK-GA] Released block {block.id} ({quantity} x {block.tier_name}) '
            f'for event {event_id}'
        )
        return InventoryOperationResult.ok(
            f'Unblocked {quantity} tickets',
            affected_count=quantity,
            log_id=log.id,
            block_ids=[block.id],
        )
