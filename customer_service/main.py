from __future__ import annotations

from fastapi import FastAPI

from customer_service.api.customers import router as customers_router
from customer_service.api.errors import register_error_handlers
from customer_service.api.health import router as health_router
from customer_service.config import Settings, get_settings
from customer_service.observability.logging import configure_logging
from customer_service.observability.middleware import RequestContextMiddleware
from customer_service.services.customer_store import CustomerStore


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    # Before the store seeds itself, so the seed records are logged as JSON too.
    configure_logging(level=settings.log_level_number, json_logs=settings.log_json)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.customer_store = CustomerStore(seed=settings.seed_data)

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(customers_router)
    app.include_router(health_router)
    return app


app = create_app()
