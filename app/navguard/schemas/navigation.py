from pydantic import BaseModel, Field

from app.navguard.navigation.models import NavigationTree, is_folder


class NavigationNodeEntry(BaseModel):
    id: str = Field(..., description="Node key, unique within the tree.")
    name: str = Field(..., description="Display label.")
    href: str | None = Field(default=None, description="Target path; absent for pure folders.")
    icon: str | None = Field(default=None, description="Opaque icon identifier for the client.")
    children: list[str] = Field(default_factory=list, description="Visible child ids in display order.")
    is_folder: bool = Field(..., description="True when the node has at least one visible child.")


class NavigationResponse(BaseModel):
    family: str = Field(..., description="Role family whose tree was used.")
    root_id: str
    current_id: str = Field(..., description="Selected node for the requested path.")
    expanded_ids: list[str] = Field(default_factory=list, description="Folders to open to reveal the current node.")
    nodes: list[NavigationNodeEntry]
    trace_id: str = ""


class NavigationFamiliesResponse(BaseModel):
    families: list[str]
    default_family: str
    trace_id: str = ""


def serialize_nodes(tree: NavigationTree) -> list[NavigationNodeEntry]:
    return [
        NavigationNodeEntry(
            id=node_id,
            name=node.name,
            href=node.href,
            icon=node.icon,
            children=list(node.children),
            is_folder=is_folder(node),
        )
        for node_id, node in tree.nodes.items()
    ]
