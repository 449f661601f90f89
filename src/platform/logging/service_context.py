"""
Service context for log lines.

Identifies which service instance wrote a log line, locally or in a container.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'inventory')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname is the short container id; fall back to PID locally
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
