from datetime import datetime, timezone
import time
from typing import Callable, List, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.inventory_metrics import metrics
from src.service.inventory.app.interface.i_event_config_query_repo import IEventConfigQueryRepo
from src.service.inventory.app.interface.i_hold_query_repo import IHoldQueryRepo
from src.service.inventory.app.interface.i_inventory_block_query_repo import (
    IInventoryBlockQueryRepo,
)
from src.service.inventory.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.inventory.domain.aggregate.event_inventory_summary import EventInventorySummary
from src.service.inventory.domain.enum.inventory_enum import SeatingType
from src.service.inventory.domain.inventory_input import (
    LayoutSection,
    normalize_event,
    normalize_layout,
    normalize_orders,
)
from src.service.inventory.domain.inventory_reconciler import reconcile_inventory


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetInventorySummaryUseCase:
    """
    Reconcile one event's inventory from its sources.

    Reads the event document, orders counted as sold, checkout holds and
    active blocks, plus the layout for reserved seating. Nothing is cached;
    every call rebuilds the summary.

    Raises:
        NotFoundError: event does not exist
        Any store failure propagates unchanged.
    """

    def __init__(
        self,
        *,
        event_config_repo: IEventConfigQueryRepo,
        order_repo: IOrderQueryRepo,
        hold_repo: IHoldQueryRepo,
        block_query_repo: IInventoryBlockQueryRepo,
        sold_order_statuses: Optional[Sequence[str]] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.event_config_repo = event_config_repo
        self.order_repo = order_repo
        self.hold_repo = hold_repo
        self.block_query_repo = block_query_repo
        self.sold_order_statuses = list(sold_order_statuses or settings.SOLD_ORDER_STATUSES)
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        event_config_repo: IEventConfigQueryRepo = Depends(
            Provide[Container.event_config_query_repo]
        ),
        order_repo: IOrderQueryRepo = Depends(Provide[Container.order_query_repo]),
        hold_repo: IHoldQueryRepo = Depends(Provide[Container.hold_query_repo]),
        block_query_repo: IInventoryBlockQueryRepo = Depends(
            Provide[Container.inventory_block_query_repo]
        ),
    ) -> Self:
        return cls(
            event_config_repo=event_config_repo,
            order_repo=order_repo,
            hold_repo=hold_repo,
            block_query_repo=block_query_repo,
        )

    @Logger.io
    async def get_summary(self, *, event_id: str) -> EventInventorySummary:
        with self.tracer.start_as_current_span(
            'use_case.get_inventory_summary',
            attributes={'event.id': event_id},
        ) as span:
            started = time.perf_counter()

            document = await self.event_config_repo.get_event_document(event_id=event_id)
            if document is None:
                raise NotFoundError('Event not found')

            config = normalize_event(event_id=event_id, document=document)
            span.set_attribute('inventory.seating_type', config.seating_type.value)

            orders = normalize_orders(
                await self.order_repo.list_order_documents(
                    event_id=event_id, statuses=self.sold_order_statuses
                )
            )
            active_blocks = await self.block_query_repo.list_active_blocks(event_id=event_id)

            layout_sections: Optional[List[LayoutSection]] = None
            if config.seating_type == SeatingType.RESERVED:
                ticket_holds = []
                seat_holds = await self.hold_repo.list_seat_holds(event_id=event_id)
                if config.layout_id:
                    layout_sections = normalize_layout(
                        await self.event_config_repo.get_layout_document(
                            layout_id=config.layout_id
                        )
                    )
            else:
                ticket_holds = await self.hold_repo.list_ticket_holds(event_id=event_id)
                seat_holds = []

            summary = reconcile_inventory(
                config=config,
                orders=orders,
                ticket_holds=ticket_holds,
                seat_holds=seat_holds,
                active_blocks=active_blocks,
                layout_sections=layout_sections,
                now=self.clock(),
            )

            metrics.record_summary_build(
                inventory_type=config.seating_type.value,
                duration=time.perf_counter() - started,
            )
            Logger.base.info(
                f'[INVENTORY] Summary built for event {event_id} ({summary.seating_type}): '
                f'capacity={summary.total_capacity} sold={summary.total_sold} '
                f'blocked={summary.total_blocked} held={summary.total_held} '
                f'available={summary.total_available}'
            )
            return summary
