from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status

from src.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    NotFoundError,
    TypeMismatchError,
)
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.adjust_capacity_use_case import AdjustCapacityUseCase
from src.service.inventory.app.command.block_ga_tickets_use_case import BlockGATicketsUseCase
from src.service.inventory.app.command.block_seats_use_case import BlockSeatsUseCase
from src.service.inventory.app.command.unblock_ga_tickets_use_case import UnblockGATicketsUseCase
from src.service.inventory.app.command.unblock_seats_use_case import UnblockSeatsUseCase
from src.service.inventory.app.dto.inventory_filter import InventoryLogFilter, SeatInventoryFilter
from src.service.inventory.app.dto.inventory_operation_result import (
    InventoryErrorKind,
    InventoryOperationResult,
)
from src.service.inventory.app.query.get_filtered_seats_use_case import GetFilteredSeatsUseCase
from src.service.inventory.app.query.get_inventory_blocks_use_case import (
    GetInventoryBlocksUseCase,
)
from src.service.inventory.app.query.get_inventory_logs_use_case import GetInventoryLogsUseCase
from src.service.inventory.app.query.get_inventory_summary_use_case import (
    GetInventorySummaryUseCase,
)
from src.service.inventory.app.query.list_inventory_activity_use_case import (
    ListInventoryActivityUseCase,
)
from src.service.inventory.domain.enum.inventory_enum import (
    InventoryLogAction,
    InventoryType,
    SeatStatus,
)
from src.service.inventory.domain.value_object.actor import (
    DEFAULT_ACTOR_ID,
    DEFAULT_ACTOR_NAME,
    Actor,
)
from src.service.inventory.driving_adapter.schema.inventory_schema import (
    AdjustCapacityRequest,
    BlockGATicketsRequest,
    BlockSeatsRequest,
    EventInventorySummaryResponse,
    InventoryActivityListResponse,
    InventoryActivityResponse,
    InventoryBlockListResponse,
    InventoryBlockResponse,
    InventoryLogListResponse,
    InventoryLogResponse,
    InventoryOperationResponse,
    SeatInventoryResponse,
    SeatListResponse,
    UnblockSeatsRequest,
)


router = APIRouter()


def get_actor(
    x_actor_id: Optional[str] = Header(None, alias='X-Actor-Id'),
    x_actor_name: Optional[str] = Header(None, alias='X-Actor-Name'),
) -> Actor:
    """Actor identity is resolved by the gateway; missing headers fall back to the admin actor."""
    return Actor(id=x_actor_id or DEFAULT_ACTOR_ID, name=x_actor_name or DEFAULT_ACTOR_NAME)


def to_response(result: InventoryOperationResult) -> InventoryOperationResponse:
    """Successful results become the response body, failures the matching HTTP error."""
    if result.success:
        return InventoryOperationResponse.model_validate(result)

    match result.error:
        case InventoryErrorKind.NOT_FOUND:
            raise NotFoundError(result.message)
        case InventoryErrorKind.TYPE_MISMATCH:
            raise TypeMismatchError(result.message)
        case InventoryErrorKind.VALIDATION:
            raise DomainError(result.message)
        case _:
            raise CustomBaseError(result.message, status_code=500)


# ============================ Summary ============================


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_inventory_summary(
    event_id: str,
    use_case: GetInventorySummaryUseCase = Depends(GetInventorySummaryUseCase.depends),
) -> EventInventorySummaryResponse:
    summary = await use_case.get_summary(event_id=event_id)
    return EventInventorySummaryResponse.model_validate(summary)


@router.patch('/capacity', status_code=status.HTTP_200_OK)
@Logger.io
async def adjust_capacity(
    event_id: str,
    request: AdjustCapacityRequest,
    actor: Actor = Depends(get_actor),
    use_case: AdjustCapacityUseCase = Depends(AdjustCapacityUseCase.depends),
) -> InventoryOperationResponse:
    result = await use_case.adjust_capacity(
        event_id=event_id,
        tier_id=request.tier_id,
        delta=request.adjustment,
        reason=request.reason,
        actor=actor,
        notes=request.notes,
    )
    return to_response(result)


# ============================ Blocks ============================


@router.get('/blocks', status_code=status.HTTP_200_OK)
@Logger.io
async def list_active_blocks(
    event_id: str,
    use_case: GetInventoryBlocksUseCase = Depends(GetInventoryBlocksUseCase.depends),
) -> InventoryBlockListResponse:
    blocks = await use_case.list_active_blocks(event_id=event_id)
    return InventoryBlockListResponse(
        event_id=event_id,
        blocks=[InventoryBlockResponse.model_validate(block) for block in blocks],
        total=len(blocks),
    )


@router.post('/blocks/ga', status_code=status.HTTP_201_CREATED)
@Logger.io
async def block_ga_tickets(
    event_id: str,
    request: BlockGATicketsRequest,
    actor: Actor = Depends(get_actor),
    use_case: BlockGATicketsUseCase = Depends(BlockGATicketsUseCase.depends),
) -> InventoryOperationResponse:
    result = await use_case.block_tickets(
        event_id=event_id,
        tier_id=request.tier_id,
        quantity=request.quantity,
        reason=request.reason,
        actor=actor,
        notes=request.notes,
    )
    return to_response(result)


@router.delete('/blocks/ga/{block_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def unblock_ga_tickets(
    event_id: str,
    block_id: str,
    actor: Actor = Depends(get_actor),
    use_case: UnblockGATicketsUseCase = Depends(UnblockGATicketsUseCase.depends),
) -> InventoryOperationResponse:
    result = await use_case.unblock_tickets(event_id=event_id, block_id=block_id, actor=actor)
    return to_response(result)


@router.post('/blocks/seats', status_code=status.HTTP_201_CREATED)
@Logger.io
async def block_seats(
    event_id: str,
    request: BlockSeatsRequest,
    actor: Actor = Depends(get_actor),
    use_case: BlockSeatsUseCase = Depends(BlockSeatsUseCase.depends),
) -> InventoryOperationResponse:
    result = await use_case.block_seats(
        event_id=event_id,
        seat_ids=request.seat_ids,
        reason=request.reason,
        actor=actor,
        notes=request.notes,
    )
    return to_response(result)


@router.delete('/blocks/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def unblock_seats(
    event_id: str,
    request: UnblockSeatsRequest,
    actor: Actor = Depends(get_actor),
    use_case: UnblockSeatsUseCase = Depends(UnblockSeatsUseCase.depends),
) -> InventoryOperationResponse:
    result = await use_case.unblock_seats(
        event_id=event_id, block_ids=request.block_ids, actor=actor
    )
    return to_response(result)


# ============================ Seats / Logs / Activity ============================


@router.get('/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def list_seats(
    event_id: str,
    section_id: Optional[str] = None,
    seat_status: Optional[SeatStatus] = Query(None, alias='status'),
    row: Optional[str] = None,
    use_case: GetFilteredSeatsUseCase = Depends(GetFilteredSeatsUseCase.depends),
) -> SeatListResponse:
    seats = await use_case.get_filtered_seats(
        event_id=event_id,
        seat_filter=SeatInventoryFilter(section_id=section_id, status=seat_status, row=row),
    )
    return SeatListResponse(
        event_id=event_id,
        seats=[SeatInventoryResponse.model_validate(seat) for seat in seats],
        total=len(seats),
    )


@router.get('/logs', status_code=status.HTTP_200_OK)
@Logger.io
async def list_logs(
    event_id: str,
    action: Optional[InventoryLogAction] = None,
    inventory_type: Optional[InventoryType] = Query(None, alias='type'),
    performed_by: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    limit: Optional[int] = None,
    use_case: GetInventoryLogsUseCase = Depends(GetInventoryLogsUseCase.depends),
) -> InventoryLogListResponse:
    logs = await use_case.get_logs(
        event_id=event_id,
        log_filter=InventoryLogFilter(
            action=action,
            type=inventory_type,
            performed_by=performed_by,
            start_date=start_date,
            end_date=end_date,
        ),
        limit=limit,
    )
    return InventoryLogListResponse(
        event_id=event_id,
        logs=[InventoryLogResponse.model_validate(log) for log in logs],
        total=len(logs),
    )


@router.get('/activity', status_code=status.HTTP_200_OK)
@Logger.io
async def list_activity(
    event_id: str,
    limit: Optional[int] = None,
    use_case: ListInventoryActivityUseCase = Depends(ListInventoryActivityUseCase.depends),
) -> InventoryActivityListResponse:
    entries = await use_case.list_activity(event_id=event_id, limit=limit)
    return InventoryActivityListResponse(
        event_id=event_id,
        logs=[InventoryActivityResponse.model_validate(entry) for entry in entries],
        total=len(entries),
    )
