"""FastAPI application factory.

``create_app`` builds the HTTP boundary around one receipt store and one
points calculator.  Tests pass their own store; ``serve`` uses the
defaults from the composition root.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from receipt_processor.domain.repository.receipt_repository import ReceiptRepository
from receipt_processor.domain.service.points_calculator import PointsCalculator
from receipt_processor.infrastructure import bootstrap
from receipt_processor.infrastructure.api.error_handlers import register_exception_handlers
from receipt_processor.infrastructure.api.routes import health_router, router
from receipt_processor.infrastructure.config import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(
    repository: ReceiptRepository | None = None,
    calculator: PointsCalculator | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    if repository is None:
        repository = bootstrap.receipt_repository()
    if calculator is None:
        calculator = bootstrap.points_calculator()

    app = FastAPI(title=settings.PROJECT_NAME, version=API_VERSION)
    app.state.receipt_repository = repository
    app.state.points_calculator = calculator

    app.include_router(router)
    app.include_router(health_router)
    register_exception_handlers(app)

    logger.info("%s API created", settings.PROJECT_NAME)
    return app
