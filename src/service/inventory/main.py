"""
Inventory Service - Main Application
Reconciles event inventory and manages admin blocks and capacity.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.inventory.driven_adapter import model  # noqa: F401  registers ORM tables


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifespan: startup and shutdown"""
    Logger.base.info('🚀 [Inventory Service] Starting up...')

    tracing = TracingConfig(service_name='inventory-service')
    tracing.setup()
    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('📊 [Inventory Service] OpenTelemetry tracing configured')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Inventory Service] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️ [Inventory Service] Database ready')

    Logger.base.info('✅ [Inventory Service] Startup complete')

    yield

    Logger.base.info('🛑 [Inventory Service] Shutting down...')

    await dispose_engine()
    tracing.shutdown()
    container.unwire()
    cleanup()

    Logger.base.info('👋 [Inventory Service] Shutdown complete')


app = create_app(lifespan=lifespan)
