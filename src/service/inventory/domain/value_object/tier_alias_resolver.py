"""
Tier Alias Resolver

Orders and holds reference GA tiers by display name, ticket type id, or
whatever the checkout flow happened to write. The resolver maps every such
reference onto one canonical tier id so the builders only ever count by id.
"""

from typing import Dict, Iterable, Tuple


class TierAliasResolver:
    def __init__(self) -> None:
        self._name_to_id: Dict[str, str] = {}

    @classmethod
    def from_tiers(cls, tiers: Iterable[Tuple[str, str]]) -> 'TierAliasResolver':
        """Build from (tier_id, tier_name) pairs, in priority order."""
        resolver = cls()
        for tier_id, tier_name in tiers:
            resolver.register(tier_id=tier_id, name=tier_name)
        return resolver

    def register(self, *, tier_id: str, name: str) -> None:
        # First registration of a name wins
        self._name_to_id.setdefault(name.lower(), tier_id)

    def resolve(self, ref: str) -> str:
        """Canonical tier id for a reference, or the reference itself when unknown."""
        return self._name_to_id.get(ref.lower(), ref)

    def __contains__(self, ref: object) -> bool:
        return isinstance(ref, str) and ref.lower() in self._name_to_id

    def __len__(self) -> int:
        return len(self._name_to_id)
