from typing import List, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.app.command.inventory_operation import run_inventory_operation
from src.service.inventory.app.dto.inventory_operation_result import InventoryOperationResult
from src.service.inventory.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.inventory.app.query.get_inventory_summary_use_case import (
    GetInventorySummaryUseCase,
)
from src.service.inventory.domain.aggregate.event_inventory_summary import SeatInventory
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import (
    InventoryLogAction,
    InventoryType,
    SeatStatus,
)
from src.service.inventory.domain.value_object.actor import Actor


def describe_seat(seat: SeatInventory) -> str:
    return f'{seat.section_name} Row {seat.row} Seat {seat.seat_number}'


class BlockSeatsUseCase:
    """
    Block reserved seats, all or nothing.

    Every requested seat must currently be available. Seats missing from the
    layout count as unavailable. When any seat fails, nothing is written.
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
    async def block_seats(
        self,
        *,
        event_id: str,
        seat_ids: Sequence[str],
        reason: str,
        actor: Actor,
        notes: Optional[str] = None,
    ) -> InventoryOperationResult:
        async def body() -> InventoryOperationResult:
            async with self.lock_registry.hold(event_id=event_id):
                return await self._block(
                    event_id=event_id,
                    seat_ids=list(dict.fromkeys(seat_ids)),
                    reason=reason,
                    actor=actor,
                    notes=notes,
                )

        return await run_inventory_operation(
            tracer=self.tracer,
            operation='block_seats',
            event_id=event_id,
            failure_message='Failed to block seats',
            body=body,
        )

    async def _block(
        self,
        *,
        event_id: str,
        seat_ids: List[str],
        reason: str,
        actor: Actor,
        notes: Optional[str],
    ) -> InventoryOperationResult:
        if not seat_ids:
            raise DomainError('At least one seat is required')

        summary = await self.summary_use_case.get_summary(event_id=event_id)
        if not summary.is_reserved:
            raise DomainError('Event does not have reserved seating')

        seats_by_id = {seat.seat_id: seat for seat in summary.iter_seats()}
        requested: List[SeatInventory] = []
        unavailable: List[str] = []
        for seat_id in seat_ids:
            seat = seats_by_id.get(seat_id)
            if seat is None:
                unavailable.append(seat_id)
            elif seat.status != SeatStatus.AVAILABLE:
                unavailable.append(describe_seat(seat))
            else:
                requested.append(seat)

        if unavailable:
            raise DomainError(f'These seats are not available: {", ".join(unavailable)}')

        blocks = [
            InventoryBlock.create_seat(
                event_id=event_id,
                seat_id=seat.seat_id,
                section_id=seat.section_id,
                section_name=seat.section_name,
                row=seat.row,
                seat_number=seat.seat_number,
                reason=reason,
                actor=actor,
                notes=notes,
            )
            for seat in requested
        ]
        first = requested[0]
        log = InventoryLog.record(
            event_id=event_id,
            action=InventoryLogAction.BLOCK if len(blocks) == 1 else InventoryLogAction.BULK_BLOCK,
            type=InventoryType.RESERVED,
            reason=reason,
            actor=actor,
            quantity_change=len(blocks),
            seat_ids=[seat.seat_id for seat in requested],
            section_id=first.section_id,
            section_name=first.section_name,
            notes=notes,
        )
        await self.command_repo.create_blocks(blocks=blocks, log=log)

        metrics.record_blocked(inventory_type=InventoryType.RESERVED.value, quantity=len(blocks))
        Logger.base.info(f'🔒 [BLOCK-SEATS] Blocked {len(blocks)} seat(s) for event {event_id}')
        return InventoryOperationResult.ok(
            f'Blocked {len(blocks)} seat(s)',
            affected_count=len(blocks),
            log_id=log.id,
            block_ids=[block.id for block in blocks],
        )
