import pytest
from fastapi.testclient import TestClient

from app.navguard.core.metrics import metrics
from app.navguard.core.security import create_access_token
from app.navguard.navigation.models import FolderNode, LeafNode, NavigationTree, PermissionRequirement


def _setup_app(registry=None):
    from app.main import create_app

    return create_app(registry=registry)


@pytest.fixture()
def client():
    metrics.reset()
    with TestClient(_setup_app()) as client:
        yield client


@pytest.fixture()
def make_token():
    def _make_token(role=None, permissions=None, sub="user-1"):
        claims = {"sub": sub}
        if role is not None:
            claims["role"] = role
        if permissions is not None:
            claims["permissions"] = permissions
        return create_access_token(claims)

    return _make_token


@pytest.fixture()
def products_tree():
    return NavigationTree(
        nodes={
            "sidebar": FolderNode(name="sidebar", children=("dashboard", "orders", "products")),
            "dashboard": LeafNode(name="Dashboard", href="/"),
            "orders": FolderNode(name="Orders", children=("allOrders",)),
            "allOrders": LeafNode(
                name="All Orders",
                href="/orders",
                required_permission=PermissionRequirement("orders", frozenset({"view", "create"})),
            ),
            "products": FolderNode(name="Products", children=("allProducts", "catalog")),
            "allProducts": LeafNode(
                name="All Products",
                href="/listing",
                required_permission=PermissionRequirement("products", frozenset({"view"})),
            ),
            "catalog": LeafNode(name="Catalog", href="/catalog", required_roles=frozenset({"admin"})),
        }
    )
