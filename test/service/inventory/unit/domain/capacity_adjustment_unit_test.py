import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.inventory.domain.aggregate.event_inventory_summary import GATierInventory
from src.service.inventory.domain.capacity_adjustment import (
    apply_capacity_change,
    ensure_above_floor,
)


def _tier(*, capacity=100, sold=30, blocked=10, held=0):
    return GATierInventory(
        tier_id='ga',
        tier_name='GA',
        capacity=capacity,
        sold=sold,
        blocked=blocked,
        held=held,
        available=capacity - sold - blocked - held,
    )


@pytest.mark.unit
class TestApplyCapacityChange:
    def test_ticket_type_capacity_and_all_aliases_are_rewritten(self):
        document = {'ticketTypes': [{'id': 'ga', 'name': 'GA', 'available': 100, 'quantity': 90}]}

        change = apply_capacity_change(document=document, tier_id='ga', delta=25)

        assert (change.previous_capacity, change.new_capacity, change.tier_name) == (100, 125, 'GA')
        assert change.is_increase
        ticket_type = change.document['ticketTypes'][0]
        assert ticket_type['capacity'] == ticket_type['available'] == ticket_type['quantity'] == 125

    def test_original_document_is_not_mutated(self):
        document = {'ticketTypes': [{'id': 'ga', 'capacity': 100}]}

        apply_capacity_change(document=document, tier_id='ga', delta=-10)

        assert document['ticketTypes'][0]['capacity'] == 100

    def test_pricing_tier_located_by_generated_id(self):
        document = {'pricing': {'tiers': [{'name': 'Early Bird', 'quantity': 40}]}}

        change = apply_capacity_change(document=document, tier_id='tier-Early Bird', delta=-5)

        assert change.new_capacity == 35
        assert change.document['pricing']['tiers'][0]['quantity'] == 35

    def test_pricing_tier_with_real_id_is_not_located_by_generated_id(self):
        document = {'pricing': {'tiers': [{'id': 'p1', 'name': 'VIP', 'capacity': 100}]}}

        with pytest.raises(NotFoundError, match='Tier not found'):
            apply_capacity_change(document=document, tier_id='tier-VIP', delta=-90)

        change = apply_capacity_change(document=document, tier_id='p1', delta=-90)
        assert (change.tier_id, change.tier_name, change.new_capacity) == ('p1', 'VIP', 10)

    def test_general_tier_uses_flat_capacity(self):
        document = {'ticketsAvailable': 300}

        change = apply_capacity_change(document=document, tier_id='general', delta=50)

        assert change.previous_capacity == 300
        assert change.tier_name == 'General Admission'
        assert change.document['totalCapacity'] == change.document['ticketsAvailable'] == 350

    def test_general_tier_is_unknown_when_tiers_are_configured(self):
        document = {'totalCapacity': 500, 'ticketTypes': [{'id': 'ga', 'capacity': 100}]}

        with pytest.raises(NotFoundError, match='Tier not found'):
            apply_capacity_change(document=document, tier_id='general', delta=50)

    def test_zero_delta_is_rejected_before_lookup(self):
        with pytest.raises(DomainError, match='Adjustment cannot be zero'):
            apply_capacity_change(document={}, tier_id='missing', delta=0)

    def test_unknown_tier(self):
        with pytest.raises(NotFoundError, match='Tier not found'):
            apply_capacity_change(
                document={'ticketTypes': [{'id': 'ga', 'capacity': 10}]}, tier_id='vip', delta=5
            )

    def test_negative_result_is_rejected(self):
        with pytest.raises(DomainError, match='New capacity cannot be negative'):
            apply_capacity_change(
                document={'ticketTypes': [{'id': 'ga', 'capacity': 10}]}, tier_id='ga', delta=-11
            )


@pytest.mark.unit
class TestEnsureAboveFloor:
    def test_reduction_to_exactly_sold_plus_blocked_is_allowed(self):
        change = apply_capacity_change(
            document={'ticketTypes': [{'id': 'ga', 'capacity': 100}]}, tier_id='ga', delta=-60
        )

        ensure_above_floor(change=change, tier=_tier())

    def test_reduction_below_floor_reports_the_numbers(self):
        change = apply_capacity_change(
            document={'ticketTypes': [{'id': 'ga', 'capacity': 100}]}, tier_id='ga', delta=-61
        )

        with pytest.raises(DomainError) as exc_info:
            ensure_above_floor(change=change, tier=_tier())

        assert exc_info.value.message == 'Cannot reduce capacity below 40 (sold: 30, blocked: 10)'

    def test_held_tickets_do_not_raise_the_floor(self):
        change = apply_capacity_change(
            document={'ticketTypes': [{'id': 'ga', 'capacity': 100}]}, tier_id='ga', delta=-60
        )

        ensure_above_floor(change=change, tier=_tier(held=20))

    def test_missing_tier_on_ga_event_refuses_the_decrease(self):
        change = apply_capacity_change(
            document={'ticketTypes': [{'id': 'ga', 'capacity': 100}]}, tier_id='ga', delta=-10
        )

        with pytest.raises(NotFoundError, match='Tier not found'):
            ensure_above_floor(change=change, tier=None)

    def test_missing_tier_on_reserved_event_passes(self):
        change = apply_capacity_change(
            document={'ticketTypes': [{'id': 'ga', 'capacity': 100}]}, tier_id='ga', delta=-10
        )

        ensure_above_floor(change=change, tier=None, is_reserved=True)

    def test_increase_needs_no_tier(self):
        change = apply_capacity_change(
            document={'ticketTypes': [{'id': 'ga', 'capacity': 100}]}, tier_id='ga', delta=10
        )

        ensure_above_floor(change=change, tier=None)
