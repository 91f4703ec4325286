import logging
from dataclasses import dataclass

from app.navguard.core.error_catalog import AppError, ErrorCatalog
from app.navguard.core.logging import log_json
from app.navguard.core.metrics import metrics
from app.navguard.navigation.active_path import DEFAULT_FALLBACK_ID, expanded_folder_ids, resolve_current
from app.navguard.navigation.catalog import NavigationRegistry, builtin_families
from app.navguard.navigation.loader import load_families
from app.navguard.navigation.models import DEFAULT_ROOT_ID, NavigationTree, ViewerContext
from app.navguard.navigation.tree_filter import filter_tree, pruned_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationView:
    family: str
    tree: NavigationTree
    current_id: str
    expanded_ids: list[str]
    pruned_count: int


class NavigationService:
    """Select the viewer's role-family tree, prune it, and locate the active entry."""

    def __init__(
        self,
        registry: NavigationRegistry,
        *,
        fallback_id: str = DEFAULT_FALLBACK_ID,
    ):
        self.registry = registry
        self.fallback_id = fallback_id

    def build_view(
        self,
        viewer: ViewerContext,
        current_path: str | None,
        *,
        family: str | None = None,
        trace_id: str = "",
    ) -> NavigationView:
        if family is not None:
            definition = self.registry.get(family)
            if definition is None:
                raise AppError(ErrorCatalog.NAVIGATION_FAMILY_NOT_FOUND, details={"family": family})
        else:
            definition = self.registry.family_for_role(viewer.role)
            if definition is None:
                raise AppError(ErrorCatalog.NAVIGATION_UNAVAILABLE, details={"role": viewer.role})

        source = definition.tree
        filtered = filter_tree(source, source.root_id, viewer.role, viewer.permissions)
        hidden = pruned_ids(source, filtered)
        view = NavigationView(
            family=definition.name,
            tree=filtered,
            current_id=resolve_current(filtered, current_path, self.fallback_id),
            expanded_ids=expanded_folder_ids(filtered, current_path),
            pruned_count=len(hidden),
        )

        metrics.record_navigation_build(family=view.family, pruned=view.pruned_count)
        log_json(
            logger,
            {
                "event": "navigation_resolved",
                "trace_id": trace_id,
                "family": view.family,
                "role": viewer.role,
                "path": current_path,
                "current_id": view.current_id,
                "visible": len(filtered),
                "pruned": view.pruned_count,
            },
        )
        return view


def build_navigation_registry(
    *,
    root_id: str = DEFAULT_ROOT_ID,
    default_family: str = "seller",
    config_path: str | None = None,
) -> NavigationRegistry:
    """Built-in role-family trees, overridden family by family from ``config_path``."""
    registry = NavigationRegistry(families=builtin_families(root_id), default_family=default_family)
    if config_path:
        overrides = load_families(config_path)
        registry = registry.merged(overrides)
        log_json(
            logger,
            {
                "event": "navigation_config_loaded",
                "path": config_path,
                "families": sorted(overrides),
            },
        )
    if default_family not in registry.families:
        logger.warning("default navigation family %r is not configured", default_family)
    return registry
