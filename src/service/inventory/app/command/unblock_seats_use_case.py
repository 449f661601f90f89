from datetime import datetime, timezone
from typing import List, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.app.command.inventory_operation import run_inventory_operation
from src.service.inventory.app.dto.inventory_operation_result import InventoryOperationResult
from src.service.inventory.app.interface.i_inventory_block_query_repo import (
    IInventoryBlockQueryRepo,
)
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import InventoryLogAction, InventoryType
from src.service.inventory.domain.value_object.actor import Actor


class UnblockSeatsUseCase:
    """
    Release reserved seat blocks by id.

    Partial success: ids that are unknown, belong to another event, are GA
    blocks or are already released are skipped. The call fails only when
    nothing is left to release.
    """

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
    async def unblock_seats(
        self, *, event_id: str, block_ids: Sequence[str], actor: Actor
    ) -> InventoryOperationResult:
        async def body() -> InventoryOperationResult:
            async with self.lock_registry.hold(event_id=event_id):
                return await self._unblock(
                    event_id=event_id, block_ids=list(dict.fromkeys(block_ids)), actor=actor
                )

        return await run_inventory_operation(
            tracer=self.tracer,
            operation='unblock_seats',
            event_id=event_id,
            failure_message='Failed to unblock seats',
            body=body,
        )

    async def _unblock(
        self, *, event_id: str, block_ids: List[str], actor: Actor
    ) -> InventoryOperationResult:
        blocks = await self.block_query_repo.get_blocks(block_ids=block_ids)
        valid: List[InventoryBlock] = [
            block
            for block in blocks
            if block.event_id == event_id
            and block.type == InventoryType.RESERVED
            and block.is_active
        ]
        if not valid:
            raise NotFoundError('No valid blocks to unblock')

        skipped = len(block_ids) - len(valid)
        if skipped:
            Logger.base.info(f'[UNBLOCK-SEATS] Skipping {skipped} invalid block id(s) for event {event_id}')

        released_at = datetime.now(timezone.utc)
        released = [block.release(actor=actor, released_at=released_at) for block in valid]
        first = valid[0]
        log = InventoryLog.record(
            event_id=event_id,
            action=InventoryLogAction.UNBLOCK if len(valid) == 1 else InventoryLogAction.BULK_UNBLOCK,
            type=InventoryType.RESERVED,
            reason='Seats released',
            actor=actor,
            quantity_change=-len(valid),
            performed_at=released_at,
            seat_ids=[block.seat_id for block in valid if block.seat_id],
            section_id=first.section_id,
            section_name=first.section_name,
        )
        await self.command_repo.release_blocks(blocks=released, log=log)

        metrics.record_released(inventory_type=InventoryType.RESERVED.value, quantity=len(valid))
        Logger.base.info(f'🔓 [UNBLOCK-SEATS] Released {len(valid)} seat(s) for event {event_id}')
        return InventoryOperationResult.ok(
            f'Unblocked {len(valid)} seat(s)',
            affected_count=len(valid),
            log_id=log.id,
            block_ids=[block.id for block in valid],
        )
