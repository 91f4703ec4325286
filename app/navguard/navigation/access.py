from __future__ import annotations

from typing import Iterable, Literal

from app.navguard.navigation.models import Grant, MatchMode, NavigationNode

AccessLogic = Literal["and", "or"]


def has_role(role: str, allowed_roles: Iterable[str]) -> bool:
    # Exact membership; roles do not inherit from each other.
    return role in set(allowed_roles)


def granted_actions(permissions: Iterable[Grant] | None, resource: str) -> set[str]:
    if not permissions:
        return set()
    return {grant.action for grant in permissions if grant.resource == resource}


def has_permission(
    permissions: Iterable[Grant] | None,
    resource: str,
    actions: Iterable[str] = (),
    mode: MatchMode = "any",
) -> bool:
    if permissions is None:
        return False
    granted = granted_actions(permissions, resource)
    if not granted:
        return False

    required = set(actions)
    if not required:
        return True
    if mode == "all":
        return required.issubset(granted)
    return not required.isdisjoint(granted)


def can_see(node: NavigationNode, role: str | None, permissions: Iterable[Grant] | None) -> bool:
    """Decide visibility of a single node, ignoring its children."""
    has_role_rule = len(node.required_roles) > 0
    requirement = node.required_permission

    if not has_role_rule and requirement is None:
        return True

    role_pass = True
    if has_role_rule:
        role_pass = role is not None and has_role(role, node.required_roles)

    perm_pass = True
    if requirement is not None:
        perm_pass = has_permission(permissions, requirement.resource, requirement.actions, requirement.mode)

    return role_pass and perm_pass


def has_access(
    role: str | None,
    permissions: Iterable[Grant] | None,
    *,
    roles: Iterable[str] | None = None,
    resource: str | None = None,
    actions: Iterable[str] = (),
    mode: MatchMode = "any",
    logic: AccessLogic = "and",
) -> bool:
    """One-stop gate combining a role check and a permission check.

    With neither side requested the gate is closed. With one side requested
    its result is returned as is; with both, ``logic`` combines them.
    """
    allowed_roles = list(roles or [])
    role_result: bool | None = None
    if allowed_roles:
        role_result = role is not None and has_role(role, allowed_roles)

    perm_result: bool | None = None
    if resource:
        perm_result = has_permission(permissions, resource, actions, mode)

    if role_result is None and perm_result is None:
        return False
    if perm_result is None:
        return bool(role_result)
    if role_result is None:
        return perm_result
    if logic == "or":
        return role_result or perm_result
    return role_result and perm_result


__all__ = ["AccessLogic", "can_see", "granted_actions", "has_access", "has_permission", "has_role"]
