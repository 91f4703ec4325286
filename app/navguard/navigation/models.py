from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Union

MatchMode = Literal["any", "all"]

DEFAULT_ROOT_ID = "sidebar"


@dataclass(frozen=True)
class PermissionRequirement:
    resource: str
    actions: frozenset[str] = frozenset()
    mode: MatchMode = "any"


@dataclass(frozen=True)
class Grant:
    resource: str
    action: str


@dataclass(frozen=True)
class LeafNode:
    name: str
    href: str
    icon: str | None = None
    required_roles: frozenset[str] = frozenset()
    required_permission: PermissionRequirement | None = None

    @property
    def children(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class FolderNode:
    name: str
    children: tuple[str, ...] = ()
    href: str | None = None
    icon: str | None = None
    required_roles: frozenset[str] = frozenset()
    required_permission: PermissionRequirement | None = None


NavigationNode = Union[LeafNode, FolderNode]


def is_folder(node: NavigationNode) -> bool:
    # An empty folder filters and renders like a leaf.
    return isinstance(node, FolderNode) and len(node.children) > 0


@dataclass(frozen=True)
class ViewerContext:
    role: str | None = None
    permissions: tuple[Grant, ...] | None = None


@dataclass(frozen=True)
class NavigationTree:
    """Id-keyed navigation nodes with a designated root.

    ``nodes`` keeps insertion order; that order is the scan order used by the
    active path resolver and the output order of the filter.
    """

    nodes: Mapping[str, NavigationNode] = field(default_factory=dict)
    root_id: str = DEFAULT_ROOT_ID

    def get(self, node_id: str) -> NavigationNode | None:
        return self.nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> NavigationNode | None:
        return self.nodes.get(self.root_id)

    def children_of(self, node_id: str) -> tuple[str, ...]:
        node = self.nodes.get(node_id)
        if node is None:
            return ()
        return node.children


__all__ = [
    "DEFAULT_ROOT_ID",
    "FolderNode",
    "Grant",
    "LeafNode",
    "MatchMode",
    "NavigationNode",
    "NavigationTree",
    "PermissionRequirement",
    "ViewerContext",
    "is_folder",
]
