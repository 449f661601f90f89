import pytest

from src.service.inventory.domain.enum.inventory_enum import (
    BlockStatus,
    InventoryLogAction,
    InventoryType,
)
from src.service.inventory.driven_adapter.model.inventory_log_model import InventoryLogModel
from src.service.inventory.driven_adapter.repo.inventory_mapper import (
    block_entity_to_model,
    block_model_to_entity,
    log_model_to_entity,
)


@pytest.mark.unit
class TestInventoryMapper:
    def test_seat_block_keeps_seat_fields_and_enum_values(self, make_seat_block):
        block = make_seat_block('B-1-2')

        model = block_entity_to_model(block)

        assert (model.type, model.status) == ('reserved', 'active')
        assert (model.seat_id, model.section_name, model.row, model.seat_number) == (
            'B-1-2',
            'Balcony',
            '1',
            '2',
        )
        assert model.quantity is None

        restored = block_model_to_entity(model)
        assert restored.type is InventoryType.RESERVED
        assert restored.status is BlockStatus.ACTIVE

    def test_log_row_without_seat_ids_maps_to_empty_list(self, now):
        model = InventoryLogModel(
            id='log-1',
            event_id='evt-ga',
            action='remove_capacity',
            type='ga',
            reason='Stage moved',
            quantity_change=-10,
            seat_ids=None,
            performed_by='admin',
            performed_by_name='Admin User',
            performed_at=now,
            previous_value=100,
            new_value=90,
        )

        log = log_model_to_entity(model)

        assert log.action is InventoryLogAction.REMOVE_CAPACITY
        assert log.seat_ids == []
        assert (log.previous_value, log.new_value) == (100, 90)
