import pytest

from src.service.inventory.app.dto.inventory_operation_result import InventoryErrorKind
from src.service.inventory.domain.enum.inventory_enum import InventoryLogAction, InventoryType


@pytest.mark.unit
class TestAdjustCapacity:
    @pytest.mark.asyncio
    async def test_increase_rewrites_every_alias_and_logs(
        self, ga_store, adjust_capacity_use_case, summary_use_case, actor
    ):
        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='ga', delta=20, reason='Extra space', actor=actor
        )

        assert result.success
        assert result.message == 'Capacity increased from 100 to 120'
        assert (result.previous_value, result.new_value, result.affected_count) == (100, 120, 20)

        ticket_type = ga_store.events['evt-ga']['ticketTypes'][0]
        assert (ticket_type['capacity'], ticket_type['available'], ticket_type['quantity']) == (
            120,
            120,
            120,
        )
        summary = await summary_use_case.get_summary(event_id='evt-ga')
        assert summary.find_tier('ga').capacity == 120

        log = ga_store.logs[-1]
        assert (log.action, log.type, log.quantity_change) == (
            InventoryLogAction.ADD_CAPACITY,
            InventoryType.GA,
            20,
        )
        assert (log.previous_value, log.new_value, log.tier_name) == (100, 120, 'General Admission')

    @pytest.mark.asyncio
    async def test_decrease_down_to_sold_is_allowed(
        self, ga_store, adjust_capacity_use_case, actor
    ):
        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='ga', delta=-70, reason='Stage moved', actor=actor
        )

        assert result.success
        assert result.message == 'Capacity decreased from 100 to 30'
        assert ga_store.logs[-1].action == InventoryLogAction.REMOVE_CAPACITY

    @pytest.mark.asyncio
    async def test_decrease_below_sold_plus_blocked_fails(
        self, ga_store, block_ga_use_case, adjust_capacity_use_case, actor
    ):
        await block_ga_use_case.block_tickets(
            event_id='evt-ga', tier_id='ga', quantity=40, reason='Sponsor', actor=actor
        )

        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='ga', delta=-40, reason='Stage moved', actor=actor
        )

        assert not result.success
        assert result.error == InventoryErrorKind.VALIDATION
        assert result.message == 'Cannot reduce capacity below 70 (sold: 30, blocked: 40)'
        assert ga_store.events['evt-ga']['ticketTypes'][0]['capacity'] == 100

    @pytest.mark.asyncio
    async def test_general_tier_adjusts_flat_capacity(
        self, store, adjust_capacity_use_case, summary_use_case, actor
    ):
        store.events['evt-flat'] = {'name': 'Open Mic', 'totalCapacity': 50}

        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-flat', tier_id='general', delta=10, reason='Bigger room', actor=actor
        )

        assert result.message == 'Capacity increased from 50 to 60'
        assert store.events['evt-flat']['totalCapacity'] == 60
        assert store.events['evt-flat']['ticketsAvailable'] == 60
        summary = await summary_use_case.get_summary(event_id='evt-flat')
        assert summary.find_tier('general').capacity == 60

    @pytest.mark.asyncio
    async def test_zero_adjustment_is_rejected(self, ga_store, adjust_capacity_use_case, actor):
        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='ga', delta=0, reason='x', actor=actor
        )

        assert result.message == 'Adjustment cannot be zero'
        assert ga_store.logs == []

    @pytest.mark.asyncio
    async def test_negative_capacity_is_rejected(self, ga_store, adjust_capacity_use_case, actor):
        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='ga', delta=-101, reason='x', actor=actor
        )

        assert result.message == 'New capacity cannot be negative'

    @pytest.mark.asyncio
    async def test_unknown_tier_and_missing_event(self, ga_store, adjust_capacity_use_case, actor):
        unknown_tier = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='vip', delta=5, reason='x', actor=actor
        )
        missing_event = await adjust_capacity_use_case.adjust_capacity(
            event_id='nope', tier_id='ga', delta=5, reason='x', actor=actor
        )

        assert (unknown_tier.error, unknown_tier.message) == (
            InventoryErrorKind.NOT_FOUND,
            'Tier not found',
        )
        assert (missing_event.error, missing_event.message) == (
            InventoryErrorKind.NOT_FOUND,
            'Event not found',
        )

    @pytest.mark.asyncio
    async def test_pricing_tier_floor_holds_under_its_real_id(
        self, store, adjust_capacity_use_case, summary_use_case, actor
    ):
        store.events['evt-vip'] = {
            'name': 'Gala',
            'pricing': {'tiers': [{'id': 'p1', 'name': 'VIP', 'capacity': 100}]},
        }
        store.add_order(
            event_id='evt-vip', order_id='order-vip-1', items=[{'ticketType': 'VIP', 'quantity': 80}]
        )

        by_generated_id = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-vip', tier_id='tier-VIP', delta=-90, reason='x', actor=actor
        )
        by_real_id = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-vip', tier_id='p1', delta=-90, reason='x', actor=actor
        )

        assert (by_generated_id.error, by_generated_id.message) == (
            InventoryErrorKind.NOT_FOUND,
            'Tier not found',
        )
        assert (by_real_id.error, by_real_id.message) == (
            InventoryErrorKind.VALIDATION,
            'Cannot reduce capacity below 80 (sold: 80, blocked: 0)',
        )
        assert store.logs == []
        summary = await summary_use_case.get_summary(event_id='evt-vip')
        assert (summary.find_tier('p1').capacity, summary.find_tier('p1').sold) == (100, 80)

    @pytest.mark.asyncio
    async def test_general_tier_is_not_found_when_ticket_types_exist(
        self, ga_store, adjust_capacity_use_case, summary_use_case, actor
    ):
        result = await adjust_capacity_use_case.adjust_capacity(
            event_id='evt-ga', tier_id='general', delta=50, reason='x', actor=actor
        )

        assert (result.success, result.error, result.message) == (
            False,
            InventoryErrorKind.NOT_FOUND,
            'Tier not found',
        )
        assert 'totalCapacity' not in ga_store.events['evt-ga']
        assert ga_store.logs == []
        summary = await summary_use_case.get_summary(event_id='evt-ga')
        assert [tier.tier_id for tier in summary.ga_tiers] == ['ga']
        assert summary.total_capacity == 100
