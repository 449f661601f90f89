import pytest

from src.service.inventory.domain.value_object.tier_alias_resolver import TierAliasResolver


@pytest.mark.unit
class TestTierAliasResolver:
    def test_resolves_display_name_case_insensitively(self):
        resolver = TierAliasResolver.from_tiers([('vip', 'VIP Lounge'), ('ga', 'General')])

        assert resolver.resolve('VIP Lounge') == 'vip'
        assert resolver.resolve('vip lounge') == 'vip'
        assert resolver.resolve('GENERAL') == 'ga'

    def test_unknown_reference_falls_back_to_itself(self):
        resolver = TierAliasResolver.from_tiers([('vip', 'VIP')])

        assert resolver.resolve('Early Bird') == 'Early Bird'
        assert 'Early Bird' not in resolver

    def test_first_registration_of_a_name_wins(self):
        resolver = TierAliasResolver.from_tiers([('ticket-vip', 'VIP'), ('tier-VIP', 'VIP')])

        assert resolver.resolve('vip') == 'ticket-vip'
        assert len(resolver) == 1

    def test_contains_ignores_non_strings(self):
        resolver = TierAliasResolver.from_tiers([('vip', 'VIP')])

        assert 'VIP' in resolver
        assert 42 not in resolver
