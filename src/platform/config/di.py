"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.state.event_lock import EventLockRegistry
from src.service.inventory.driven_adapter.repo.event_config_query_repo_impl import (
    EventConfigQueryRepoImpl,
)
from src.service.inventory.driven_adapter.repo.hold_query_repo_impl import HoldQueryRepoImpl
from src.service.inventory.driven_adapter.repo.inventory_block_query_repo_impl import (
    InventoryBlockQueryRepoImpl,
)
from src.service.inventory.driven_adapter.repo.inventory_command_repo_impl import (
    InventoryCommandRepoImpl,
)
from src.service.inventory.driven_adapter.repo.inventory_log_query_repo_impl import (
    InventoryLogQueryRepoImpl,
)
from src.service.inventory.driven_adapter.repo.order_query_repo_impl import OrderQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (event-loop-aware engine behind a session factory)
    database = providers.Singleton(Database)

    # One lock per event id for the lifetime of the process
    event_lock_registry = providers.Singleton(EventLockRegistry)

    # Repositories (stateless - use session_factory per call)
    event_config_query_repo = providers.Singleton(
        EventConfigQueryRepoImpl, session_factory=database.provided.session
    )
    order_query_repo = providers.Singleton(
        OrderQueryRepoImpl, session_factory=database.provided.session
    )
    hold_query_repo = providers.Singleton(
        HoldQueryRepoImpl, session_factory=database.provided.session
    )
    inventory_block_query_repo = providers.Singleton(
        InventoryBlockQueryRepoImpl, session_factory=database.provided.session
    )
    inventory_log_query_repo = providers.Singleton(
        InventoryLogQueryRepoImpl, session_factory=database.provided.session
    )
    inventory_command_repo = providers.Singleton(
        InventoryCommandRepoImpl, session_factory=database.provided.session
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
