from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from app.navguard.navigation.access import can_see
from app.navguard.navigation.models import FolderNode, Grant, NavigationNode, NavigationTree, is_folder


def compute_visibility(
    tree: NavigationTree,
    root_id: str,
    role: str | None,
    permissions: Iterable[Grant] | None,
) -> dict[str, bool]:
    """Visibility of every node reachable from ``root_id``.

    A folder is visible when it passes its own rules and keeps at least one
    visible child. Unknown ids are invisible. Visibility flows upward from
    visible leaves, so cycles and child order do not change the result; each
    node's own rules are evaluated once.
    """
    grants = tuple(permissions) if permissions is not None else None
    allowed: dict[str, bool] = {}
    parents: dict[str, list[str]] = {}

    pending = [root_id]
    while pending:
        node_id = pending.pop()
        if node_id in allowed:
            continue
        node = tree.get(node_id)
        if node is None:
            allowed[node_id] = False
            continue
        allowed[node_id] = can_see(node, role, grants)
        for child_id in node.children:
            parents.setdefault(child_id, []).append(node_id)
            if child_id not in allowed:
                pending.append(child_id)

    visible = dict.fromkeys(allowed, False)
    pending = [node_id for node_id, ok in allowed.items() if ok and not is_folder(tree.nodes[node_id])]
    while pending:
        node_id = pending.pop()
        if visible[node_id]:
            continue
        visible[node_id] = True
        # parents are folders; they show once one child shows and their own rules pass
        pending.extend(parent_id for parent_id in parents.get(node_id, ()) if allowed[parent_id])
    return visible


def _empty_root(tree: NavigationTree, root_id: str) -> FolderNode:
    original = tree.get(root_id)
    if original is None:
        return FolderNode(name=root_id)
    return FolderNode(name=original.name, href=original.href, icon=original.icon)


def _prune(node: NavigationNode, visible: dict[str, bool]) -> NavigationNode:
    if not is_folder(node):
        return node
    kept = tuple(child_id for child_id in node.children if visible.get(child_id, False))
    return replace(node, children=kept)


def filter_tree(
    tree: NavigationTree,
    root_id: str | None = None,
    role: str | None = None,
    permissions: Iterable[Grant] | None = None,
) -> NavigationTree:
    """Return a new tree holding only the nodes the viewer may see.

    The root always survives: when it is pruned the result holds the root
    alone, as a folder without children.
    """
    root_id = root_id or tree.root_id
    visible = compute_visibility(tree, root_id, role, permissions)

    nodes: dict[str, NavigationNode] = {}
    for node_id, node in tree.nodes.items():
        if visible.get(node_id, False):
            nodes[node_id] = _prune(node, visible)

    if root_id not in nodes:
        nodes = {root_id: _empty_root(tree, root_id)}
    return NavigationTree(nodes=nodes, root_id=root_id)


def pruned_ids(original: NavigationTree, filtered: NavigationTree) -> list[str]:
    return [node_id for node_id in original.nodes if node_id not in filtered.nodes]


__all__ = ["compute_visibility", "filter_tree", "pruned_ids"]
