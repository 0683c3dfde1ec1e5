"""
EventHub app factory

Builds the FastAPI app: CORS, the {detail, code} error contract, the event,
ticket and admin routers, and a liveness probe.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventhub.platform.config.core_setting import settings
from eventhub.platform.constant.route_constant import ADMIN_BASE, EVENT_BASE, HEALTH, TICKET_BASE
from eventhub.platform.exception.exception_handlers import register_exception_handlers
from eventhub.service.ticketing.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from eventhub.service.ticketing.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from eventhub.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)


def create_app(*, lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]]) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description='Event catalog, ticket issuance and QR-bound ticket purchase',
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(event_router, prefix=EVENT_BASE, tags=['event'])
    app.include_router(ticket_router, prefix=TICKET_BASE, tags=['ticket'])
    app.include_router(admin_router, prefix=ADMIN_BASE, tags=['admin'])

    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    return app
