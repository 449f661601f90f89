"""
Inventory Activity Feed

Combines the audit log with sales read from recent orders so an admin sees
both manual inventory changes and customer purchases on one timeline.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.dto.inventory_activity import (
    CUSTOMER_ACTOR_ID,
    SALE_ACTION,
    InventoryActivityEntry,
)
from src.service.inventory.app.interface.i_inventory_log_query_repo import IInventoryLogQueryRepo
from src.service.inventory.app.interface.i_order_query_repo import IOrderQueryRepo
from src.service.inventory.app.query.get_inventory_logs_use_case import GetInventoryLogsUseCase
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import InventoryType
from src.service.inventory.domain.inventory_input import OrderRecord, normalize_order


_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(entry: InventoryActivityEntry) -> datetime:
    # Entries without a timestamp sink to the end
    if entry.performed_at is None:
        return _OLDEST
    if entry.performed_at.tzinfo is None:
        return entry.performed_at.replace(tzinfo=timezone.utc)
    return entry.performed_at


def log_to_activity(log: InventoryLog) -> InventoryActivityEntry:
    details: Dict[str, Any] = {}
    if log.previous_value is not None:
        details['previousValue'] = log.previous_value
    if log.new_value is not None:
        details['newValue'] = log.new_value
    if log.section_name:
        details['sectionName'] = log.section_name
    if log.notes:
        details['notes'] = log.notes

    return InventoryActivityEntry(
        id=log.id,
        event_id=log.event_id,
        action=log.action.value,
        type=log.type.value,
        performed_by=log.performed_by,
        performed_by_name=log.performed_by_name,
        performed_at=log.performed_at,
        reason=log.reason,
        tier_id=log.tier_id,
        tier_name=log.tier_name,
        quantity=log.quantity_change,
        seat_ids=list(log.seat_ids),
        details=details,
    )


def order_to_sale(*, event_id: str, order: OrderRecord) -> Optional[InventoryActivityEntry]:
    """Sale entry for an order, or None when it carries neither seats nor ticket lines."""
    base_details: Dict[str, Any] = {
        'orderId': order.order_id,
        'orderNumber': order.order_number,
        'total': order.total,
        'customerEmail': order.customer_email,
    }
    common = dict(
        id=f'sale-{order.order_id}',
        event_id=event_id,
        action=SALE_ACTION,
        performed_by=CUSTOMER_ACTOR_ID,
        performed_by_name=order.customer_name or order.customer_email or 'Customer',
        performed_at=order.created_at,
        reason=f'Order #{order.order_number or order.order_id[-6:].upper()}',
    )

    if order.seat_ids:
        return InventoryActivityEntry(
            type=InventoryType.RESERVED.value,
            seat_ids=list(order.seat_ids),
            details=base_details,
            **common,
        )

    if order.ga_lines:
        breakdown: Counter[str] = Counter()
        for line in order.ga_lines:
            breakdown[line.tier_ref] += line.quantity
        return InventoryActivityEntry(
            type=InventoryType.GA.value,
            quantity=sum(breakdown.values()),
            details={
                **base_details,
                'ticketTypes': [
                    {'name': name, 'quantity': quantity} for name, quantity in breakdown.items()
                ],
            },
            **common,
        )

    return None


class ListInventoryActivityUseCase:
    def __init__(
        self,
        *,
        log_query_repo: IInventoryLogQueryRepo,
        order_repo: IOrderQueryRepo,
        sale_order_statuses: Optional[Sequence[str]] = None,
        sales_limit: Optional[int] = None,
    ) -> None:
        self.log_query_repo = log_query_repo
        self.order_repo = order_repo
        self.sale_order_statuses = list(sale_order_statuses or settings.SALE_ORDER_STATUSES)
        self.sales_limit = sales_limit or settings.ACTIVITY_SALES_LIMIT

    @classmethod
    @inject
    def depends(
        cls,
        log_query_repo: IInventoryLogQueryRepo = Depends(
            Provide[Container.inventory_log_query_repo]
        ),
        order_repo: IOrderQueryRepo = Depends(Provide[Container.order_query_repo]),
    ) -> Self:
        return cls(log_query_repo=log_query_repo, order_repo=order_repo)

    @Logger.io
    async def list_activity(
        self, *, event_id: str, limit: Optional[int] = None
    ) -> List[InventoryActivityEntry]:
        limit = GetInventoryLogsUseCase.clamp_limit(limit)

        logs = await self.log_query_repo.list_recent_logs(event_id=event_id, limit=limit)
        order_documents = await self.order_repo.list_recent_order_documents(
            event_id=event_id, statuses=self.sale_order_statuses, limit=self.sales_limit
        )

        entries = [log_to_activity(log) for log in logs]
        for document in order_documents:
            sale = order_to_sale(event_id=event_id, order=normalize_order(document))
            if sale is not None:
                entries.append(sale)

        entries.sort(key=_sort_key, reverse=True)
        return entries[:limit]
