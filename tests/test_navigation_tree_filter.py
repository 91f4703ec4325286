import pytest

from app.navguard.navigation.catalog import ADMIN_NODES
from app.navguard.navigation.loader import build_tree
from app.navguard.navigation.models import FolderNode, Grant, LeafNode, NavigationTree, PermissionRequirement, is_folder
from app.navguard.navigation.tree_filter import compute_visibility, filter_tree, pruned_ids


def test_seller_without_grants_keeps_only_unconstrained_entries(products_tree):
    filtered = filter_tree(products_tree, "sidebar", "seller", [])

    assert list(filtered.nodes) == ["sidebar", "dashboard"]
    assert filtered.nodes["sidebar"].children == ("dashboard",)


def test_children_rewritten_in_original_order(products_tree):
    filtered = filter_tree(products_tree, "sidebar", "admin", [Grant("orders", "view")])

    assert filtered.nodes["sidebar"].children == ("dashboard", "orders", "products")
    assert filtered.nodes["products"].children == ("catalog",)
    assert "allProducts" not in filtered
    assert filtered.nodes["orders"].children == ("allOrders",)


def test_filter_returns_new_tree_and_leaves_input_untouched(products_tree):
    before = dict(products_tree.nodes)
    filtered = filter_tree(products_tree, "sidebar", None, None)

    assert filtered is not products_tree
    assert products_tree.nodes == before
    assert products_tree.nodes["products"].children == ("allProducts", "catalog")


def test_folder_with_own_rule_needs_rule_and_visible_child():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("settings",)),
            "settings": FolderNode(name="Settings", children=("prefs",), required_roles=frozenset({"admin"})),
            "prefs": LeafNode(name="Preferences", href="/settings/preferences"),
        }
    )

    assert "settings" not in filter_tree(tree, "sidebar", "seller", None)
    assert "settings" in filter_tree(tree, "sidebar", "admin", None)


def test_dangling_children_are_invisible():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("reports", "ghost")),
            "reports": FolderNode(name="Reports", children=("missing",)),
        }
    )

    filtered = filter_tree(tree, "sidebar", "admin", None)

    assert list(filtered.nodes) == ["sidebar"]
    assert filtered.nodes["sidebar"].children == ()


def test_pruned_root_is_kept_without_children():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("catalog",)),
            "catalog": LeafNode(name="Catalog", href="/catalog", required_roles=frozenset({"admin"})),
        }
    )

    filtered = filter_tree(tree, "sidebar", None, None)

    assert filtered.nodes == {"sidebar": FolderNode(name="sidebar")}
    assert filtered.root_id == "sidebar"


def test_missing_root_yields_synthetic_root():
    filtered = filter_tree(NavigationTree(nodes={}), "sidebar", "admin", None)
    assert filtered.nodes == {"sidebar": FolderNode(name="sidebar")}


def test_unreachable_nodes_are_dropped(products_tree):
    nodes = dict(products_tree.nodes)
    nodes["orphan"] = LeafNode(name="Orphan", href="/orphan")
    filtered = filter_tree(NavigationTree(nodes=nodes), "sidebar", "admin", None)

    assert "orphan" not in filtered


def test_shared_subtree_is_evaluated_once(monkeypatch):
    from app.navguard.navigation import tree_filter

    calls = []
    original = tree_filter.can_see

    def counting_can_see(node, role, permissions):
        calls.append(node.name)
        return original(node, role, permissions)

    monkeypatch.setattr(tree_filter, "can_see", counting_can_see)
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("left", "right")),
            "left": FolderNode(name="left", children=("shared",)),
            "right": FolderNode(name="right", children=("shared",)),
            "shared": LeafNode(name="shared", href="/shared"),
        }
    )

    visibility = compute_visibility(tree, "sidebar", None, None)

    assert visibility == {"sidebar": True, "left": True, "right": True, "shared": True}
    assert calls.count("shared") == 1


def test_cycles_do_not_recurse_forever():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("a",)),
            "a": FolderNode(name="a", children=("b",)),
            "b": FolderNode(name="b", children=("a", "leaf")),
            "leaf": LeafNode(name="leaf", href="/leaf"),
        }
    )

    filtered = filter_tree(tree, "sidebar", None, None)

    assert set(filtered.nodes) == {"sidebar", "a", "b", "leaf"}


def test_root_id_defaults_to_tree_root(products_tree):
    assert filter_tree(products_tree, None, "admin", None) == filter_tree(products_tree, "sidebar", "admin", None)


ROLES = [None, "admin", "seller", "doctor", "unknown-role"]
GRANT_SETS = [
    None,
    [],
    [Grant("orders", "view")],
    [Grant("orders", "view"), Grant("orders", "create"), Grant("products", "view")],
    [Grant("companies", "view"), Grant("users", "view"), Grant("brands", "view")],
]


@pytest.mark.parametrize("role", ROLES)
@pytest.mark.parametrize("permissions", GRANT_SETS)
def test_filtering_is_idempotent(role, permissions):
    tree = build_tree(ADMIN_NODES)
    once = filter_tree(tree, "sidebar", role, permissions)
    assert filter_tree(once, "sidebar", role, permissions) == once


@pytest.mark.parametrize("role", ROLES)
@pytest.mark.parametrize("permissions", GRANT_SETS)
def test_visible_folders_keep_children(role, permissions):
    filtered = filter_tree(build_tree(ADMIN_NODES), "sidebar", role, permissions)

    for node_id, node in filtered.nodes.items():
        if node_id == "sidebar":
            continue
        if isinstance(node, FolderNode):
            assert node.children, node_id
        for child_id in node.children:
            assert child_id in filtered


@pytest.mark.parametrize("role", ROLES)
def test_adding_permissions_never_hides_nodes(role):
    tree = build_tree(ADMIN_NODES)
    smaller = [Grant("orders", "view")]
    larger = smaller + [Grant("companies", "view"), Grant("users", "view"), Grant("products", "create")]

    visible_small = set(filter_tree(tree, "sidebar", role, smaller).nodes)
    visible_large = set(filter_tree(tree, "sidebar", role, larger).nodes)

    assert visible_small <= visible_large


def test_pruned_ids_lists_hidden_nodes_in_tree_order(products_tree):
    filtered = filter_tree(products_tree, "sidebar", "seller", [Grant("products", "view")])
    assert pruned_ids(products_tree, filtered) == ["orders", "allOrders", "catalog"]


def test_empty_folder_filters_like_leaf():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("placeholder",)),
            "placeholder": FolderNode(name="Coming soon", href="/soon"),
        }
    )
    filtered = filter_tree(tree, "sidebar", None, None)

    assert "placeholder" in filtered
    assert not is_folder(filtered.nodes["placeholder"])


def test_permission_requirement_mode_all_on_folder():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("orders",)),
            "orders": FolderNode(
                name="Orders",
                children=("list",),
                required_permission=PermissionRequirement("orders", frozenset({"view", "export"}), "all"),
            ),
            "list": LeafNode(name="List", href="/orders"),
        }
    )

    assert "orders" not in filter_tree(tree, "sidebar", "seller", [Grant("orders", "view")])
    assert "orders" in filter_tree(tree, "sidebar", "seller", [Grant("orders", "view"), Grant("orders", "export")])


@pytest.mark.parametrize("order", [("x", "y"), ("y", "x")])
def test_cycle_visibility_ignores_child_order(order):
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=order),
            "x": FolderNode(name="x", children=("y", "leaf")),
            "y": FolderNode(name="y", children=("x",)),
            "leaf": LeafNode(name="leaf", href="/leaf"),
        }
    )

    visibility = compute_visibility(tree, "sidebar", None, None)

    assert visibility == {"sidebar": True, "x": True, "y": True, "leaf": True}
    assert filter_tree(tree, "sidebar", None, None).nodes["y"].children == ("x",)


def test_cycle_without_visible_leaf_stays_hidden():
    tree = NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("x", "dashboard")),
            "x": FolderNode(name="x", children=("y",)),
            "y": FolderNode(name="y", children=("x",)),
            "dashboard": LeafNode(name="Dashboard", href="/"),
        }
    )

    filtered = filter_tree(tree, "sidebar", None, None)

    assert list(filtered.nodes) == ["sidebar", "dashboard"]
