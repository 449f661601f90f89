import attrs


DEFAULT_ACTOR_ID = 'admin'
DEFAULT_ACTOR_NAME = 'Admin User'


@attrs.define(frozen=True)
class Actor:
    """Who performed an inventory mutation. Identity is resolved upstream."""

    id: str = DEFAULT_ACTOR_ID
    name: str = DEFAULT_ACTOR_NAME
