from fastapi import APIRouter, Depends, Query, Request

from app.navguard.core.context import RequestContext
from app.navguard.core.deps import get_navigation_registry, get_navigation_service, require_request_context
from app.navguard.core.error_catalog import ErrorCatalog
from app.navguard.navigation.catalog import NavigationRegistry
from app.navguard.schemas.errors import error_responses
from app.navguard.schemas.navigation import NavigationFamiliesResponse, NavigationResponse, serialize_nodes
from app.navguard.services.navigation import NavigationService

router = APIRouter()

NAVIGATION_ERROR_RESPONSES = error_responses(
    ErrorCatalog.INVALID_TOKEN,
    ErrorCatalog.AUTHENTICATION_REQUIRED,
    ErrorCatalog.NAVIGATION_FAMILY_NOT_FOUND,
    ErrorCatalog.VALIDATION_ERROR,
    ErrorCatalog.NAVIGATION_UNAVAILABLE,
)


@router.get("/navigation", response_model=NavigationResponse, responses=NAVIGATION_ERROR_RESPONSES)
async def get_navigation(
    request: Request,
    path: str = Query("", description="Current router path, matched exactly against node hrefs."),
    family: str | None = Query(None, description="Force a role family instead of selecting it by role."),
    context: RequestContext = Depends(require_request_context),
    service: NavigationService = Depends(get_navigation_service),
):
    view = service.build_view(context.viewer, path, family=family, trace_id=context.trace_id)
    return NavigationResponse(
        family=view.family,
        root_id=view.tree.root_id,
        current_id=view.current_id,
        expanded_ids=view.expanded_ids,
        nodes=serialize_nodes(view.tree),
        trace_id=getattr(request.state, "trace_id", ""),
    )


@router.get("/navigation/families", response_model=NavigationFamiliesResponse)
async def list_navigation_families(
    request: Request,
    registry: NavigationRegistry = Depends(get_navigation_registry),
):
    return NavigationFamiliesResponse(
        families=registry.names(),
        default_family=registry.default_family,
        trace_id=getattr(request.state, "trace_id", ""),
    )
