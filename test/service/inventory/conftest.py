"""
Inventory test fixtures

In-memory repositories implementing the inventory ports. They share one
`InMemoryInventoryStore` so a write through the command repo is visible to
the next summary build, which is how the real repos behave against one
database.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

import attrs
import pytest

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.app.command.adjust_capacity_use_case import AdjustCapacityUseCase
from src.service.inventory.app.command.block_ga_tickets_use_case import BlockGATicketsUseCase
from src.service.inventory.app.command.block_seats_use_case import BlockSeatsUseCase
from src.service.inventory.app.command.unblock_ga_tickets_use_case import UnblockGATicketsUseCase
from src.service.inventory.app.command.unblock_seats_use_case import UnblockSeatsUseCase
from src.service.inventory.app.interface import (
    IEventConfigQueryRepo,
    IHoldQueryRepo,
    IInventoryBlockQueryRepo,
    IInventoryCommandRepo,
    IInventoryLogQueryRepo,
    IOrderQueryRepo,
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
from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.entity.inventory_log_entity import InventoryLog
from src.service.inventory.domain.enum.inventory_enum import BlockStatus
from src.service.inventory.domain.value_object.actor import Actor
from src.service.inventory.domain.value_object.hold import SeatHold, TicketHold


NOW = datetime(2026, 6, 1, 18, 0, tzinfo=timezone.utc)
GA_EVENT_ID = 'evt-ga'
RESERVED_EVENT_ID = 'evt-reserved'
LAYOUT_ID = 'layout-1'


# =============================================================================
# In-memory store and repositories
# =============================================================================


class InMemoryInventoryStore:
    def __init__(self) -> None:
        self.events: Dict[str, Dict[str, Any]] = {}
        self.layouts: Dict[str, Dict[str, Any]] = {}
        self.orders: List[Dict[str, Any]] = []
        self.ticket_holds: List[TicketHold] = []
        self.seat_holds: List[SeatHold] = []
        self.blocks: Dict[str, InventoryBlock] = {}
        self.logs: List[InventoryLog] = []

    def add_order(
        self,
        *,
        event_id: str,
        order_id: str,
        status: str = 'completed',
        created_at: datetime = NOW,
        **document: Any,
    ) -> None:
        self.orders.append(
            {
                'id': order_id,
                'eventId': event_id,
                'status': status,
                'createdAt': created_at,
                **document,
            }
        )


class FakeEventConfigQueryRepo(IEventConfigQueryRepo):
    def __init__(self, store: InMemoryInventoryStore) -> None:
        self.store = store

    async def get_event_document(self, *, event_id: str) -> Optional[Dict[str, Any]]:
        return self.store.events.get(event_id)

    async def get_layout_document(self, *, layout_id: str) -> Optional[Dict[str, Any]]:
        return self.store.layouts.get(layout_id)


class FakeOrderQueryRepo(IOrderQueryRepo):
    def __init__(self, store: InMemoryInventoryStore) -> None:
        self.store = store

    def _matching(self, event_id: str, statuses: Sequence[str]) -> List[Dict[str, Any]]:
        return [
            order
            for order in self.store.orders
            if order['eventId'] == event_id and order['status'] in statuses
        ]

    async def list_order_documents(
        self, *, event_id: str, statuses: Sequence[str]
    ) -> List[Dict[str, Any]]:
        return self._matching(event_id, statuses)

    async def list_recent_order_documents(
        self, *, event_id: str, statuses: Sequence[str], limit: int
    ) -> List[Dict[str, Any]]:
        orders = sorted(
            self._matching(event_id, statuses), key=lambda order: order['createdAt'], reverse=True
        )
        return orders[:limit]


class FakeHoldQueryRepo(IHoldQueryRepo):
    def __init__(self, store: InMemoryInventoryStore) -> None:
        self.store = store

    async def list_ticket_holds(self, *, event_id: str) -> List[TicketHold]:
        return [hold for hold in self.store.ticket_holds if hold.event_id == event_id]

    async def list_seat_holds(self, *, event_id: str) -> List[SeatHold]:
        return [hold for hold in self.store.seat_holds if hold.event_id == event_id]


class FakeInventoryBlockQueryRepo(IInventoryBlockQueryRepo):
    def __init__(self, store: InMemoryInventoryStore) -> None:
        self.store = store

    async def get_block(self, *, block_id: str) -> Optional[InventoryBlock]:
        return self.store.blocks.get(block_id)

    async def get_blocks(self, *, block_ids: Sequence[str]) -> List[InventoryBlock]:
        return [self.store.blocks[block_id] for block_id in block_ids if block_id in self.store.blocks]

    async def list_active_blocks(self, *, event_id: str) -> List[InventoryBlock]:
        blocks = [
            block
            for block in self.store.blocks.values()
            if block.event_id == event_id and block.status == BlockStatus.ACTIVE
        ]
        return sorted(blocks, key=lambda block: block.blocked_at, reverse=True)


class FakeInventoryLogQueryRepo(IInventoryLogQueryRepo):
    def __init__(self, store: InMemoryInventoryStore) -> None:
        self.store = store

    async def list_recent_logs(self, *, event_id: str, limit: int) -> List[InventoryLog]:
        logs = [log for log in self.store.logs if log.event_id == event_id]
        logs.sort(key=lambda log: (log.performed_at, log.id), reverse=True)
        return logs[:limit]


class FakeInventoryCommandRepo(IInventoryCommandRepo):
    def __init__(self, store: InMemoryInventoryStore) -> None:
        self.store = store

    async def create_blocks(self, *, blocks: List[InventoryBlock], log: InventoryLog) -> None:
        for block in blocks:
            self.store.blocks[block.id] = block
        self.store.logs.append(log)

    async def release_blocks(self, *, blocks: List[InventoryBlock], log: InventoryLog) -> None:
        for block in blocks:
            current = self.store.blocks.get(block.id)
            if current is None or current.status != BlockStatus.ACTIVE:
                raise ConflictError('Block already released')
        for block in blocks:
            self.store.blocks[block.id] = block
        self.store.logs.append(log)

    async def update_event_document(
        self, *, event_id: str, document: Dict[str, Any], log: InventoryLog
    ) -> None:
        if event_id not in self.store.events:
            raise NotFoundError('Event not found')
        self.store.events[event_id] = document
        self.store.logs.append(log)


# =============================================================================
# Sample documents
# =============================================================================


def ga_event_document(**overrides: Any) -> Dict[str, Any]:
    document: Dict[str, Any] = {
        'name': 'Summer Festival',
        'venue': {'id': 'venue-1', 'name': 'Riverside Park'},
        'ticketTypes': [{'id': 'ga', 'name': 'General Admission', 'capacity': 100}],
    }
    document.update(overrides)
    return document


def reserved_event_document(**overrides: Any) -> Dict[str, Any]:
    document: Dict[str, Any] = {
        'name': 'Symphony Night',
        'seatingType': 'reserved',
        'layoutId': LAYOUT_ID,
        'venue': {'id': 'venue-2', 'name': 'Concert Hall'},
    }
    document.update(overrides)
    return document


def layout_document() -> Dict[str, Any]:
    """Section A: rows 1 and 2 with seats 1-5 each. Section B: row 1 with seats 1-2."""
    return {
        'sections': [
            {
                'id': 'A',
                'name': 'Orchestra',
                'price': 120,
                'category': 'premium',
                'rows': [
                    {
                        'id': '1',
                        'label': '1',
                        'seats': [{'id': str(n), 'number': str(n)} for n in range(1, 6)],
                    },
                    {
                        'id': '2',
                        'label': '2',
                        'price': 100,
                        'seats': [{'id': str(n), 'number': str(n)} for n in range(1, 6)],
                    },
                ],
            },
            {
                'id': 'B',
                'name': 'Balcony',
                'price': 60,
                'rows': [
                    {
                        'id': '1',
                        'label': '1',
                        'seats': [
                            {'id': '1', 'number': '1', 'price': 75, 'category': 'view'},
                            {'id': '2', 'number': '2'},
                        ],
                    }
                ],
            },
        ]
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def actor() -> Actor:
    return Actor(id='admin-7', name='Dana Admin')


@pytest.fixture
def store() -> InMemoryInventoryStore:
    return InMemoryInventoryStore()


@pytest.fixture
def ga_store(store: InMemoryInventoryStore) -> InMemoryInventoryStore:
    """GA event: capacity 100, 30 sold, 10 held (plus one expired hold)."""
    store.events[GA_EVENT_ID] = ga_event_document()
    store.add_order(
        event_id=GA_EVENT_ID,
        order_id='order-ga-1',
        items=[{'ticketType': 'General Admission', 'quantity': 30}],
    )
    store.ticket_holds.append(
        TicketHold(
            event_id=GA_EVENT_ID,
            ticket_type_id='ga',
            quantity=10,
            held_until=NOW + timedelta(minutes=10),
        )
    )
    store.ticket_holds.append(
        TicketHold(
            event_id=GA_EVENT_ID,
            ticket_type_id='ga',
            quantity=5,
            held_until=NOW - timedelta(minutes=1),
        )
    )
    return store


@pytest.fixture
def reserved_store(store: InMemoryInventoryStore) -> InMemoryInventoryStore:
    """Reserved event: A-1-5 sold, A-2-1 held."""
    store.events[RESERVED_EVENT_ID] = reserved_event_document()
    store.layouts[LAYOUT_ID] = layout_document()
    store.add_order(
        event_id=RESERVED_EVENT_ID,
        order_id='order-rs-1',
        items=[{'seatInfo': {'sectionId': 'A', 'row': '1', 'seat': '5'}}],
    )
    store.seat_holds.append(
        SeatHold(event_id=RESERVED_EVENT_ID, seat_id='A-2-1', held_until=NOW + timedelta(minutes=5))
    )
    return store


@pytest.fixture
def event_config_repo(store: InMemoryInventoryStore) -> FakeEventConfigQueryRepo:
    return FakeEventConfigQueryRepo(store)


@pytest.fixture
def order_repo(store: InMemoryInventoryStore) -> FakeOrderQueryRepo:
    return FakeOrderQueryRepo(store)


@pytest.fixture
def hold_repo(store: InMemoryInventoryStore) -> FakeHoldQueryRepo:
    return FakeHoldQueryRepo(store)


@pytest.fixture
def block_query_repo(store: InMemoryInventoryStore) -> FakeInventoryBlockQueryRepo:
    return FakeInventoryBlockQueryRepo(store)


@pytest.fixture
def log_query_repo(store: InMemoryInventoryStore) -> FakeInventoryLogQueryRepo:
    return FakeInventoryLogQueryRepo(store)


@pytest.fixture
def command_repo(store: InMemoryInventoryStore) -> FakeInventoryCommandRepo:
    return FakeInventoryCommandRepo(store)


@pytest.fixture
def lock_registry() -> EventLockRegistry:
    return EventLockRegistry()


@pytest.fixture
def summary_use_case(
    event_config_repo: FakeEventConfigQueryRepo,
    order_repo: FakeOrderQueryRepo,
    hold_repo: FakeHoldQueryRepo,
    block_query_repo: FakeInventoryBlockQueryRepo,
) -> GetInventorySummaryUseCase:
    return GetInventorySummaryUseCase(
        event_config_repo=event_config_repo,
        order_repo=order_repo,
        hold_repo=hold_repo,
        block_query_repo=block_query_repo,
        clock=lambda: NOW,
    )


@pytest.fixture
def blocks_use_case(block_query_repo: FakeInventoryBlockQueryRepo) -> GetInventoryBlocksUseCase:
    return GetInventoryBlocksUseCase(block_query_repo=block_query_repo)


@pytest.fixture
def logs_use_case(log_query_repo: FakeInventoryLogQueryRepo) -> GetInventoryLogsUseCase:
    return GetInventoryLogsUseCase(log_query_repo=log_query_repo)


@pytest.fixture
def filtered_seats_use_case(
    summary_use_case: GetInventorySummaryUseCase,
) -> GetFilteredSeatsUseCase:
    return GetFilteredSeatsUseCase(summary_use_case=summary_use_case)


@pytest.fixture
def activity_use_case(
    log_query_repo: FakeInventoryLogQueryRepo, order_repo: FakeOrderQueryRepo
) -> ListInventoryActivityUseCase:
    return ListInventoryActivityUseCase(log_query_repo=log_query_repo, order_repo=order_repo)


@pytest.fixture
def adjust_capacity_use_case(
    event_config_repo: FakeEventConfigQueryRepo,
    command_repo: FakeInventoryCommandRepo,
    summary_use_case: GetInventorySummaryUseCase,
    lock_registry: EventLockRegistry,
) -> AdjustCapacityUseCase:
    return AdjustCapacityUseCase(
        event_config_repo=event_config_repo,
        command_repo=command_repo,
        summary_use_case=summary_use_case,
        lock_registry=lock_registry,
    )


@pytest.fixture
def block_ga_use_case(
    command_repo: FakeInventoryCommandRepo,
    summary_use_case: GetInventorySummaryUseCase,
    lock_registry: EventLockRegistry,
) -> BlockGATicketsUseCase:
    return BlockGATicketsUseCase(
        command_repo=command_repo,
        summary_use_case=summary_use_case,
        lock_registry=lock_registry,
    )


@pytest.fixture
def unblock_ga_use_case(
    block_query_repo: FakeInventoryBlockQueryRepo,
    command_repo: FakeInventoryCommandRepo,
    lock_registry: EventLockRegistry,
) -> UnblockGATicketsUseCase:
    return UnblockGATicketsUseCase(
        block_query_repo=block_query_repo,
        command_repo=command_repo,
        lock_registry=lock_registry,
    )


@pytest.fixture
def block_seats_use_case(
    command_repo: FakeInventoryCommandRepo,
    summary_use_case: GetInventorySummaryUseCase,
    lock_registry: EventLockRegistry,
) -> BlockSeatsUseCase:
    return BlockSeatsUseCase(
        command_repo=command_repo,
        summary_use_case=summary_use_case,
        lock_registry=lock_registry,
    )


@pytest.fixture
def unblock_seats_use_case(
    block_query_repo: FakeInventoryBlockQueryRepo,
    command_repo: FakeInventoryCommandRepo,
    lock_registry: EventLockRegistry,
) -> UnblockSeatsUseCase:
    return UnblockSeatsUseCase(
        block_query_repo=block_query_repo,
        command_repo=command_repo,
        lock_registry=lock_registry,
    )


@pytest.fixture
def make_ga_block(actor: Actor):
    def _make(
        *, event_id: str = GA_EVENT_ID, quantity: int = 5, reason: str = 'Sponsor'
    ) -> InventoryBlock:
        return InventoryBlock.create_ga(
            event_id=event_id,
            tier_id='ga',
            tier_name='General Admission',
            quantity=quantity,
            reason=reason,
            actor=actor,
            blocked_at=NOW,
        )

    return _make


@pytest.fixture
def make_seat_block(actor: Actor):
    def _make(
        seat_id: str,
        *,
        event_id: str = RESERVED_EVENT_ID,
        status: BlockStatus = BlockStatus.ACTIVE,
    ) -> InventoryBlock:
        section_id, row, seat_number = seat_id.split('-')
        block = InventoryBlock.create_seat(
            event_id=event_id,
            seat_id=seat_id,
            section_id=section_id,
            section_name='Orchestra' if section_id == 'A' else 'Balcony',
            row=row,
            seat_number=seat_number,
            reason='Camera position',
            actor=actor,
            blocked_at=NOW,
        )
        return attrs.evolve(block, status=status)

    return _make
