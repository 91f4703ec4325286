from __future__ import annotations

from app.navguard.navigation.models import NavigationTree, is_folder

DEFAULT_FALLBACK_ID = "dashboard"


def find_by_href(tree: NavigationTree, current_path: str) -> str | None:
    for node_id, node in tree.nodes.items():
        if node.href is not None and node.href == current_path:
            return node_id
    return None


def resolve_current(
    tree: NavigationTree,
    current_path: str | None,
    fallback_id: str = DEFAULT_FALLBACK_ID,
) -> str:
    """Pick the selected node id for ``current_path``.

    Exact ``href`` match in tree order first, then the fallback node, then the
    first top-level entry, then the root itself.
    """
    if current_path:
        matched = find_by_href(tree, current_path)
        if matched is not None:
            return matched

    if fallback_id in tree:
        return fallback_id

    top_level = tree.children_of(tree.root_id)
    if top_level:
        return top_level[0]
    return tree.root_id


def expanded_folder_ids(tree: NavigationTree, current_path: str | None) -> list[str]:
    """Folder ids, in tree order, whose subtree holds the node at ``current_path``."""
    if not current_path:
        return []

    parents: dict[str, list[str]] = {}
    for node_id, node in tree.nodes.items():
        for child_id in node.children:
            parents.setdefault(child_id, []).append(node_id)

    # walk upward from every match; ``leads`` doubles as the cycle guard
    leads: set[str] = set()
    pending = [node_id for node_id, node in tree.nodes.items() if node.href == current_path]
    while pending:
        node_id = pending.pop()
        if node_id in leads:
            continue
        leads.add(node_id)
        pending.extend(parents.get(node_id, ()))

    return [node_id for node_id, node in tree.nodes.items() if node_id in leads and is_folder(node)]


def resolve_expanded_folders(tree: NavigationTree, current_path: str | None) -> frozenset[str]:
    return frozenset(expanded_folder_ids(tree, current_path))


__all__ = [
    "DEFAULT_FALLBACK_ID",
    "expanded_folder_ids",
    "find_by_href",
    "resolve_current",
    "resolve_expanded_folders",
]
