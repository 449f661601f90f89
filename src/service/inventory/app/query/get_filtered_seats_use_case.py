from typing import List, Optional, Self

from fastapi import Depends

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.dto.inventory_filter import SeatInventoryFilter
from src.service.inventory.app.query.get_inventory_summary_use_case import (
    GetInventorySummaryUseCase,
)
from src.service.inventory.domain.aggregate.event_inventory_summary import SeatInventory


class GetFilteredSeatsUseCase:
    """Seats of a reserved event narrowed by section, status and row. GA or missing events yield []."""

    def __init__(self, *, summary_use_case: GetInventorySummaryUseCase) -> None:
        self.summary_use_case = summary_use_case

    @classmethod
    def depends(
        cls,
        summary_use_case: GetInventorySummaryUseCase = Depends(GetInventorySummaryUseCase.depends),
    ) -> Self:
        return cls(summary_use_case=summary_use_case)

    @Logger.io
    async def get_filtered_seats(
        self, *, event_id: str, seat_filter: Optional[SeatInventoryFilter] = None
    ) -> List[SeatInventory]:
        try:
            summary = await self.summary_use_case.get_summary(event_id=event_id)
        except NotFoundError:
            return []
        if not summary.is_reserved:
            return []

        seat_filter = seat_filter or SeatInventoryFilter()
        if seat_filter.section_id:
            section = summary.find_section(seat_filter.section_id)
            seats = list(section.seats) if section else []
        else:
            seats = list(summary.iter_seats())

        return [seat for seat in seats if seat_filter.matches(seat)]
