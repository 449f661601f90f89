from datetime import datetime, timedelta, timezone

import pytest

from src.service.inventory.domain.entity.inventory_block_entity import InventoryBlock
from src.service.inventory.domain.enum.inventory_enum import SeatStatus
from src.service.inventory.domain.inventory_input import (
    normalize_event,
    normalize_layout,
    normalize_orders,
)
from src.service.inventory.domain.reserved_inventory_builder import (
    build_reserved_inventory,
    classify_seat,
)
from src.service.inventory.domain.value_object.actor import Actor
from src.service.inventory.domain.value_object.hold import SeatHold


NOW = datetime(2026, 6, 1, 18, 0, tzinfo=timezone.utc)

LAYOUT = {
    'sections': [
        {
            'id': 'A',
            'name': 'Orchestra',
            'price': 120,
            'category': 'premium',
            'rows': [
                {'id': '1', 'label': '1', 'seats': [{'id': str(n), 'number': str(n)} for n in range(1, 5)]},
                {
                    'id': '2',
                    'label': '2',
                    'price': 100,
                    'seats': [{'id': '1', 'number': '1', 'price': 90, 'category': 'aisle'}],
                },
            ],
        }
    ]
}


def _seat_block(seat_id):
    section_id, row, number = seat_id.split('-')
    return InventoryBlock.create_seat(
        event_id='evt-1',
        seat_id=seat_id,
        section_id=section_id,
        section_name='Orchestra',
        row=row,
        seat_number=number,
        reason='Camera',
        actor=Actor(),
    )


def _build(*, document=None, layout=LAYOUT, orders=(), holds=(), blocks=()):
    return build_reserved_inventory(
        config=normalize_event(event_id='evt-1', document=document or {'layoutId': 'lay-1'}),
        layout_sections=normalize_layout(layout),
        orders=normalize_orders(orders),
        holds=list(holds),
        active_blocks=list(blocks),
        now=NOW,
    )


@pytest.mark.unit
class TestClassifySeat:
    def test_precedence_sold_blocked_held_available(self):
        everything = dict(
            sold_seats={'s'},
            blocked_seats={'s': ('r', 'b'), 'b': ('r', 'b')},
            held_seats={'s', 'b', 'h'},
        )

        assert classify_seat('s', **everything) == SeatStatus.SOLD
        assert classify_seat('b', **everything) == SeatStatus.BLOCKED
        assert classify_seat('h', **everything) == SeatStatus.HELD
        assert classify_seat('x', **everything) == SeatStatus.AVAILABLE


@pytest.mark.unit
class TestReservedInventoryBuilder:
    def test_each_seat_gets_one_status_and_sections_aggregate(self):
        block = _seat_block('A-1-2')
        summary = _build(
            orders=[
                {'id': 'o1', 'items': [{'seatInfo': {'sectionId': 'A', 'row': '1', 'seat': '1'}}]},
                {'id': 'o2', 'tickets': [{'seatInfo': {'sectionId': 'A', 'row': '1', 'number': '2'}}]},
            ],
            holds=[
                SeatHold(event_id='evt-1', seat_id='A-1-3', held_until=NOW + timedelta(minutes=5)),
                SeatHold(event_id='evt-1', seat_id='A-1-4', held_until=NOW - timedelta(seconds=1)),
            ],
            blocks=[block],
        )

        statuses = {seat.seat_id: seat.status for seat in summary.iter_seats()}
        assert statuses == {
            'A-1-1': SeatStatus.SOLD,
            'A-1-2': SeatStatus.SOLD,  # sold wins over the block
            'A-1-3': SeatStatus.HELD,
            'A-1-4': SeatStatus.AVAILABLE,
            'A-2-1': SeatStatus.AVAILABLE,
        }

        section = summary.find_section('A')
        assert (section.total_seats, section.sold, section.blocked, section.held, section.available) == (
            5,
            2,
            0,
            1,
            2,
        )
        assert summary.total_capacity == 5
        assert summary.total_available == 2

    def test_blocked_seat_carries_reason_and_block_id(self):
        block = _seat_block('A-1-3')
        summary = _build(blocks=[block])

        seat = summary.find_seat('A-1-3')
        assert seat.status == SeatStatus.BLOCKED
        assert seat.block_reason == 'Camera'
        assert seat.block_id == block.id
        assert summary.find_section('A').blocked == 1

    def test_price_and_category_inherit_seat_then_row_then_section(self):
        summary = _build()

        row_one_seat = summary.find_seat('A-1-1')
        assert (row_one_seat.price, row_one_seat.price_category) == (120, 'premium')

        row_two_seat = summary.find_seat('A-2-1')
        assert (row_two_seat.price, row_two_seat.price_category) == (90, 'aisle')

    def test_falls_back_to_event_section_snapshot_without_layout(self):
        document = {
            'seatingType': 'reserved',
            'venue': {
                'availableSections': [
                    {'sectionId': 'S', 'sectionName': 'Standing', 'rows': [{'id': 'R', 'seats': [{'id': '1'}]}]}
                ]
            },
        }

        summary = _build(document=document, layout=None)

        assert [seat.seat_id for seat in summary.iter_seats()] == ['S-R-1']
        assert summary.sections[0].section_name == 'Standing'

    def test_empty_layout_yields_zero_totals(self):
        summary = _build(layout={'sections': []})

        assert summary.sections == []
        assert summary.total_capacity == 0
        assert summary.total_available == 0
