import json

import pytest

from app.navguard.navigation.loader import (
    NavigationConfigError,
    build_tree,
    load_families,
    parse_families,
    parse_node,
    parse_permission,
)
from app.navguard.navigation.models import FolderNode, LeafNode, PermissionRequirement


def test_node_with_children_is_folder():
    node = parse_node("products", {"name": "products", "href": "/products", "children": ["all-products"]})
    assert node == FolderNode(name="products", children=("all-products",), href="/products")


def test_node_without_children_is_leaf():
    node = parse_node("orders", {"name": "Orders", "href": "/orders", "icon": "shopping-bag"})
    assert node == LeafNode(name="Orders", href="/orders", icon="shopping-bag")


def test_leaf_requires_href():
    with pytest.raises(NavigationConfigError) as exc:
        parse_node("orders", {"name": "Orders"})
    assert exc.value.location == "nodes.orders"


def test_name_defaults_to_id():
    assert parse_node("dashboard", {"href": "/"}).name == "dashboard"


def test_panel_permission_shape_is_accepted():
    requirement = parse_permission({"page": "orders", "action": ["view", "create"]}, "x")
    assert requirement == PermissionRequirement("orders", frozenset({"view", "create"}), "any")


def test_single_action_string_is_accepted():
    requirement = parse_permission({"resource": "brands", "actions": "view", "mode": "all"}, "x")
    assert requirement == PermissionRequirement("brands", frozenset({"view"}), "all")


def test_unknown_mode_is_rejected():
    with pytest.raises(NavigationConfigError):
        parse_permission({"resource": "orders", "actions": ["view"], "mode": "most"}, "x")


def test_permission_needs_resource():
    with pytest.raises(NavigationConfigError):
        parse_permission({"actions": ["view"]}, "x")


def test_camel_case_rule_keys_are_accepted():
    node = parse_node(
        "companies",
        {
            "href": "/companies",
            "requiredRoles": ["admin"],
            "requiredPermission": {"page": "companies", "action": ["view"]},
        },
    )
    assert node.required_roles == frozenset({"admin"})
    assert node.required_permission.resource == "companies"


def test_children_must_be_list_of_ids():
    with pytest.raises(NavigationConfigError):
        parse_node("sidebar", {"children": "dashboard"})


def test_build_tree_requires_root():
    with pytest.raises(NavigationConfigError):
        build_tree({"dashboard": {"href": "/"}})


def test_build_tree_keeps_dangling_children():
    tree = build_tree({"sidebar": {"children": ["dashboard", "ghost"]}, "dashboard": {"href": "/"}})
    assert tree.children_of("sidebar") == ("dashboard", "ghost")
    assert list(tree.nodes) == ["sidebar", "dashboard"]


def test_parse_families_reports_family_location():
    payload = {"families": {"distributor": {"nodes": {"sidebar": {"children": []}, "broken": {}}}}}
    with pytest.raises(NavigationConfigError) as exc:
        parse_families(payload)
    assert exc.value.location == "families.distributor"


def test_parse_families_requires_families_mapping():
    with pytest.raises(NavigationConfigError):
        parse_families({"nodes": {}})


def test_load_families_from_file(tmp_path):
    config = {
        "families": {
            "distributor": {
                "roles": ["distributor"],
                "root": "menu",
                "nodes": {
                    "menu": {"children": ["dashboard"]},
                    "dashboard": {"name": "Dashboard", "href": "/"},
                },
            }
        }
    }
    path = tmp_path / "navigation.json"
    path.write_text(json.dumps(config), encoding="utf-8")

    families = load_families(path)

    assert list(families) == ["distributor"]
    assert families["distributor"].roles == frozenset({"distributor"})
    assert families["distributor"].tree.root_id == "menu"


def test_load_families_missing_file(tmp_path):
    with pytest.raises(NavigationConfigError):
        load_families(tmp_path / "missing.json")


def test_load_families_invalid_json(tmp_path):
    path = tmp_path / "navigation.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(NavigationConfigError):
        load_families(path)
