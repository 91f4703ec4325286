from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import ValidationError

from app.navguard.core.config import settings
from app.navguard.core.context import RequestContext, build_request_context
from app.navguard.core.error_catalog import AppError, ErrorCatalog
from app.navguard.core.security import TokenData, bearer_scheme, decode_token
from app.navguard.navigation.catalog import NavigationRegistry
from app.navguard.services.navigation import NavigationService


def get_optional_token_data(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenData | None:
    if credentials is None:
        return None
    try:
        payload = decode_token(credentials.credentials)
        return TokenData(**payload)
    except (JWTError, ValidationError, TypeError) as exc:
        raise AppError(ErrorCatalog.INVALID_TOKEN) from exc


def require_request_context(
    request: Request,
    token_data: TokenData | None = Depends(get_optional_token_data),
) -> RequestContext:
    trace_id = getattr(request.state, "trace_id", "")
    if token_data is None:
        if not settings.ALLOW_ANONYMOUS_NAVIGATION:
            raise AppError(ErrorCatalog.AUTHENTICATION_REQUIRED)
        context = build_request_context(user_id=None, role=None, permissions=None, trace_id=trace_id)
    else:
        context = build_request_context(
            user_id=token_data.sub,
            role=token_data.role,
            permissions=token_data.grants(),
            trace_id=trace_id,
        )
    request.state.user_id = context.user_id
    request.state.role = context.role
    return context


def get_navigation_registry(request: Request) -> NavigationRegistry:
    registry = getattr(request.app.state, "navigation_registry", None)
    if registry is None:
        raise AppError(ErrorCatalog.NAVIGATION_UNAVAILABLE)
    return registry


def get_navigation_service(registry: NavigationRegistry = Depends(get_navigation_registry)) -> NavigationService:
    return NavigationService(registry, fallback_id=settings.NAVIGATION_FALLBACK_ID)


__all__ = [
    "get_navigation_registry",
    "get_navigation_service",
    "get_optional_token_data",
    "require_request_context",
]
