from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from app.navguard.navigation.models import (
    DEFAULT_ROOT_ID,
    FolderNode,
    LeafNode,
    NavigationNode,
    NavigationTree,
    PermissionRequirement,
)

_MATCH_MODES = {"any", "all"}


class NavigationConfigError(ValueError):
    def __init__(self, message: str, location: str | None = None):
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


@dataclass(frozen=True)
class FamilyDefinition:
    name: str
    tree: NavigationTree
    roles: frozenset[str] = frozenset()


def _string_set(value: Any, location: str) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise NavigationConfigError("expected a list of strings", location)
    if not all(isinstance(item, str) for item in value):
        raise NavigationConfigError("expected a list of strings", location)
    return frozenset(value)


def parse_permission(raw: Any, location: str) -> PermissionRequirement | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise NavigationConfigError("required_permission must be an object", location)

    # "page" is the key used by the admin panel front end.
    resource = raw.get("resource", raw.get("page"))
    if not isinstance(resource, str) or not resource:
        raise NavigationConfigError("required_permission.resource must be a non-empty string", location)

    actions = _string_set(raw.get("actions", raw.get("action")), f"{location}.actions")
    mode = raw.get("mode") or "any"
    if mode not in _MATCH_MODES:
        raise NavigationConfigError(f"unsupported match mode {mode!r}", location)
    return PermissionRequirement(resource=resource, actions=actions, mode=mode)


def parse_node(node_id: str, raw: Any) -> NavigationNode:
    location = f"nodes.{node_id}"
    if not isinstance(raw, Mapping):
        raise NavigationConfigError("node must be an object", location)

    name = raw.get("name", node_id)
    if not isinstance(name, str):
        raise NavigationConfigError("name must be a string", location)
    href = raw.get("href")
    if href is not None and not isinstance(href, str):
        raise NavigationConfigError("href must be a string", location)
    icon = raw.get("icon")
    if icon is not None and not isinstance(icon, str):
        raise NavigationConfigError("icon must be a string", location)

    required_roles = _string_set(raw.get("required_roles", raw.get("requiredRoles")), f"{location}.required_roles")
    required_permission = parse_permission(
        raw.get("required_permission", raw.get("requiredPermission")),
        f"{location}.required_permission",
    )

    if "children" in raw:
        children = raw["children"]
        if not isinstance(children, (list, tuple)) or not all(isinstance(item, str) for item in children):
            raise NavigationConfigError("children must be a list of node ids", location)
        return FolderNode(
            name=name,
            children=tuple(children),
            href=href,
            icon=icon,
            required_roles=required_roles,
            required_permission=required_permission,
        )

    if href is None:
        raise NavigationConfigError("a node without children needs an href", location)
    return LeafNode(
        name=name,
        href=href,
        icon=icon,
        required_roles=required_roles,
        required_permission=required_permission,
    )


def build_tree(nodes: Mapping[str, Any], root_id: str = DEFAULT_ROOT_ID) -> NavigationTree:
    if not isinstance(nodes, Mapping):
        raise NavigationConfigError("nodes must be an object keyed by node id")
    if root_id not in nodes:
        raise NavigationConfigError(f"root node {root_id!r} is missing")
    parsed = {str(node_id): parse_node(str(node_id), raw) for node_id, raw in nodes.items()}
    return NavigationTree(nodes=parsed, root_id=root_id)


def parse_families(payload: Any) -> dict[str, FamilyDefinition]:
    if not isinstance(payload, Mapping) or not isinstance(payload.get("families"), Mapping):
        raise NavigationConfigError("expected an object with a 'families' mapping")

    families: dict[str, FamilyDefinition] = {}
    for family_name, raw in payload["families"].items():
        location = f"families.{family_name}"
        if not isinstance(raw, Mapping):
            raise NavigationConfigError("family must be an object", location)
        root_id = raw.get("root", DEFAULT_ROOT_ID)
        try:
            tree = build_tree(raw.get("nodes"), root_id)
        except NavigationConfigError as exc:
            raise NavigationConfigError(str(exc), location) from exc
        families[family_name] = FamilyDefinition(
            name=family_name,
            tree=tree,
            roles=_string_set(raw.get("roles"), f"{location}.roles"),
        )
    return families


def load_families(path: str | Path) -> dict[str, FamilyDefinition]:
    config_path = Path(path)
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise NavigationConfigError(f"navigation config not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise NavigationConfigError(f"invalid JSON ({exc.msg} at line {exc.lineno})", str(config_path)) from exc
    return parse_families(payload)


__all__ = [
    "FamilyDefinition",
    "NavigationConfigError",
    "build_tree",
    "load_families",
    "parse_families",
    "parse_node",
    "parse_permission",
]
