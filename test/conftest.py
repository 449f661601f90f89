"""
Test Configuration and Fixtures

Environment variables are set before any application import, because
settings and the loguru sinks are configured at import time.

Architecture:
- Unit tests (test/**/unit/): in-memory fakes, no PostgreSQL
- Shared fakes and fixtures live in test/service/inventory/
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'ticket_inventory_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'ticket_inventory_test_db_{worker_id}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import pytest  # noqa: E402


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if '/unit/' in str(item.fspath).replace('\\', '/'):
            item.add_marker(pytest.mark.unit)
