"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from eventhub.platform.app_factory import create_app
from eventhub.platform.config.di import container
from eventhub.platform.config.wire_modules import WIRE_MODULES
from eventhub.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from eventhub.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [EventHub] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [EventHub] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [EventHub] Database tables ready')

    # Task group for fire-and-forget notifications
    async with anyio.create_task_group() as tg:
        container.task_group.override(tg)
        Logger.base.info('✅ [EventHub] Ready to serve requests')

        yield

        Logger.base.info('🛑 [EventHub] Shutting down, waiting for pending notifications...')
        container.task_group.reset_override()
    # Leaving the task group waits for in-flight sends to finish

    await dispose_engine()
    Logger.base.info('🗄️  [EventHub] Database engine disposed')

    container.unwire()
    Logger.base.info('👋 [EventHub] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
