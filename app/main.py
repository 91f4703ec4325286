from fastapi import FastAPI

from app.navguard.api import api_router
from app.navguard.core.config import settings
from app.navguard.core.errors import setup_exception_handlers
from app.navguard.core.logging import configure_logging
from app.navguard.middleware.observability import ObservabilityMiddleware
from app.navguard.middleware.trace import TraceIdMiddleware
from app.navguard.navigation.catalog import NavigationRegistry
from app.navguard.services.navigation import build_navigation_registry


def create_app(registry: NavigationRegistry | None = None) -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)
    if registry is None:
        registry = build_navigation_registry(
            root_id=settings.NAVIGATION_ROOT_ID,
            default_family=settings.NAVIGATION_DEFAULT_FAMILY,
            config_path=settings.NAVIGATION_CONFIG_PATH or None,
        )
    app.state.navigation_registry = registry
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(ObservabilityMiddleware)
    setup_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
