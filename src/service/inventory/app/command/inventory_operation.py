"""
Shared envelope for inventory mutations.

A mutation body raises `CustomBaseError` for business failures; this runner
turns the outcome into an `InventoryOperationResult`, so callers always get
a result object. Unexpected errors are logged with traceback and reported
with a fixed, operation-specific message.
"""

import time
from typing import Awaitable, Callable

from opentelemetry.trace import Status, StatusCode, Tracer

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics
from src.service.inventory.app.dto.inventory_operation_result import (
    InventoryErrorKind,
    InventoryOperationResult,
)


async def run_inventory_operation(
    *,
    tracer: Tracer,
    operation: str,
    event_id: str,
    failure_message: str,
    body: Callable[[], Awaitable[InventoryOperationResult]],
) -> InventoryOperationResult:
    started = time.perf_counter()
    with tracer.start_as_current_span(
        f'use_case.{operation}',
        attributes={'event.id': event_id},
    ) as span:
        try:
            result = await body()
        except CustomBaseError as e:
            kind = InventoryErrorKind.from_error(e)
            Logger.base.warning(f'⚠️ [{operation.upper()}] Rejected for event {event_id}: {e.message}')
            result = InventoryOperationResult.failure(e.message, error=kind)
        except Exception as e:
            Logger.base.exception(f'❌ [{operation.upper()}] Failed for event {event_id}: {e}')
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR))
            result = InventoryOperationResult.failure(
                failure_message, error=InventoryErrorKind.INFRASTRUCTURE
            )

        span.set_attribute('inventory.success', result.success)
        if result.error:
            span.set_attribute('inventory.error', result.error.value)

    metrics.record_operation(
        operation=operation,
        result=result.error.value if result.error else 'success',
        duration=time.perf_counter() - started,
    )
    return result
