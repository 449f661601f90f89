from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.inventory.domain.enum.inventory_enum import (
    BlockStatus,
    InventoryLogAction,
    InventoryType,
    SeatingType,
    SeatStatus,
)


# ============================ Requests ============================


class AdjustCapacityRequest(BaseModel):
    tier_id: str = Field(..., min_length=1)
    adjustment: int
    reason: str = Field(..., min_length=1)
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'tier_id': 'vip',
                'adjustment': -20,
                'reason': 'Stage extension',
            }
        }


class BlockGATicketsRequest(BaseModel):
    tier_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    reason: str = Field(..., min_length=1)
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'tier_id': 'general',
                'quantity': 10,
                'reason': 'Sponsor allocation',
                'notes': 'Released 48h before doors',
            }
        }


class BlockSeatsRequest(BaseModel):
    seat_ids: List[str] = Field(..., min_length=1)
    reason: str = Field(..., min_length=1)
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'seat_ids': ['A-1-5', 'A-1-6'],
                'reason': 'Camera position',
            }
        }


class UnblockSeatsRequest(BaseModel):
    block_ids: List[str] = Field(..., min_length=1)


# ============================ Responses ============================


class InventoryOperationResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'success': True,
                'message': 'Blocked 10 tickets',
                'affected_count': 10,
                'log_id': '01234567-89ab-7def-0123-456789abcdef',
                'block_ids': ['01234567-89ab-7def-0123-456789abcdf0'],
            }
        },
    )

    success: bool
    message: str
    affected_count: Optional[int] = None
    log_id: Optional[str] = None
    block_ids: List[str] = []
    previous_value: Optional[int] = None
    new_value: Optional[int] = None


class GATierInventoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    tier_id: str
    tier_name: str
    capacity: int
    sold: int
    blocked: int
    held: int
    available: int


class SeatInventoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    seat_id: str
    section_id: str
    section_name: str
    row: str
    seat_number: str
    status: SeatStatus
    block_reason: Optional[str] = None
    block_id: Optional[str] = None
    price: Optional[float] = None
    price_category: Optional[str] = None


class SectionInventoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    section_id: str
    section_name: str
    total_seats: int
    sold: int
    blocked: int
    held: int
    available: int
    seats: List[SeatInventoryResponse] = []


class EventInventorySummaryResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'event_id': 'evt-1',
                'event_name': 'Summer Festival',
                'seating_type': 'general',
                'total_capacity': 100,
                'total_sold': 30,
                'total_blocked': 0,
                'total_held': 10,
                'total_available': 60,
                'ga_tiers': [
                    {
                        'tier_id': 'general',
                        'tier_name': 'General Admission',
                        'capacity': 100,
                        'sold': 30,
                        'blocked': 0,
                        'held': 10,
                        'available': 60,
                    }
                ],
                'sections': [],
            }
        },
    )

    event_id: str
    event_name: str
    seating_type: SeatingType
    venue_id: Optional[str] = None
    venue_name: Optional[str] = None
    layout_id: Optional[str] = None
    total_capacity: int
    total_sold: int
    total_blocked: int
    total_held: int
    total_available: int
    ga_tiers: List[GATierInventoryResponse] = []
    sections: List[SectionInventoryResponse] = []


class InventoryBlockResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    event_id: str
    type: InventoryType
    status: BlockStatus
    reason: str
    notes: Optional[str] = None
    blocked_by: str
    blocked_by_name: str
    blocked_at: datetime
    tier_id: Optional[str] = None
    tier_name: Optional[str] = None
    quantity: Optional[int] = None
    seat_id: Optional[str] = None
    section_id: Optional[str] = None
    section_name: Optional[str] = None
    row: Optional[str] = None
    seat_number: Optional[str] = None
    released_by: Optional[str] = None
    released_by_name: Optional[str] = None
    released_at: Optional[datetime] = None


class InventoryBlockListResponse(BaseModel):
    event_id: str
    blocks: List[InventoryBlockResponse]
    total: int


class InventoryLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    event_id: str
    action: InventoryLogAction
    type: InventoryType
    reason: str
    performed_by: str
    performed_by_name: str
    performed_at: datetime
    quantity_change: int
    tier_id: Optional[str] = None
    tier_name: Optional[str] = None
    seat_ids: List[str] = []
    section_id: Optional[str] = None
    section_name: Optional[str] = None
    previous_value: Optional[int] = None
    new_value: Optional[int] = None
    notes: Optional[str] = None


class InventoryLogListResponse(BaseModel):
    event_id: str
    logs: List[InventoryLogResponse]
    total: int


class SeatListResponse(BaseModel):
    event_id: str
    seats: List[SeatInventoryResponse]
    total: int


class InventoryActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    event_id: str
    action: str
    type: str
    performed_by: str
    performed_by_name: str
    performed_at: Optional[datetime] = None
    reason: Optional[str] = None
    tier_id: Optional[str] = None
    tier_name: Optional[str] = None
    quantity: Optional[int] = None
    seat_ids: List[str] = []
    details: Dict[str, Any] = {}


class InventoryActivityListResponse(BaseModel):
    event_id: str
    logs: List[InventoryActivityResponse]
    total: int
