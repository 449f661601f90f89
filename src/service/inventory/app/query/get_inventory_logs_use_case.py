from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.dto.inventory_filter import InventoryLogFilter
from src.service.inventory.app.interface.i_inventory_log_query_repo import IInventoryLogQueryRepo
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog


class GetInventoryLogsUseCase:
    """
    Audit log query.

    The newest `limit` entries are fetched first and the filter is applied to
    that window afterwards, so a filtered result can hold fewer than `limit`
    entries even when older matching entries exist.
    """

    def __init__(self, *, log_query_repo: IInventoryLogQueryRepo) -> None:
        self.log_query_repo = log_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        log_query_repo: IInventoryLogQueryRepo = Depends(
            Provide[Container.inventory_log_query_repo]
        ),
    ) -> Self:
        return cls(log_query_repo=log_query_repo)

    @staticmethod
    def clamp_limit(limit: Optional[int]) -> int:
        if limit is None:
            return settings.INVENTORY_LOG_DEFAULT_LIMIT
        return max(1, min(limit, settings.INVENTORY_LOG_MAX_LIMIT))

    @Logger.io
    async def get_logs(
        self,
        *,
        event_id: str,
        log_filter: Optional[InventoryLogFilter] = None,
        limit: Optional[int] = None,
    ) -> List[InventoryLog]:
        logs = await self.log_query_repo.list_recent_logs(
            event_id=event_id, limit=self.clamp_limit(limit)
        )
        if log_filter is None:
            return logs
        return [log for log in logs if log_filter.matches(log)]
