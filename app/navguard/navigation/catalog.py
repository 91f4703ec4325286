from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from app.navguard.navigation.loader import FamilyDefinition, build_tree
from app.navguard.navigation.models import NavigationTree

ROLE_ADMIN = "admin"
ROLE_SELLER = "seller"
ROLE_DOCTOR = "doctor"
ROLE_DISTRIBUTOR = "distributor"
ROLE_MANUFACTURER = "manufacturer"


def _any(resource: str, *actions: str) -> dict:
    return {"resource": resource, "actions": list(actions), "mode": "any"}


ADMIN_NODES: dict[str, dict] = {
    "sidebar": {
        "name": "sidebar",
        "children": [
            "dashboard",
            "orders",
            "products",
            "customers",
            "brandPartners",
            "marketing",
            "analytics",
            "app",
            "settings",
        ],
    },
    "dashboard": {"name": "dashboard", "href": "/", "icon": "home"},
    "orders": {"name": "Orders", "icon": "shopping-bag", "children": ["allOrders"]},
    "allOrders": {"name": "All Orders", "href": "/orders", "required_permission": _any("orders", "view", "create")},
    "products": {
        "name": "Products",
        "icon": "shopping-bag",
        "children": ["allProducts", "catalog", "productCategories", "productTags", "productAttributes"],
    },
    "allProducts": {"name": "All Products", "href": "/listing", "required_permission": _any("products", "view", "create")},
    "catalog": {"name": "Catalog", "href": "/listing/catalog", "required_roles": [ROLE_ADMIN]},
    "customers": {"name": "Customers", "icon": "user", "children": ["allCustomers", "customerReviews", "customerRoutines"]},
    "allCustomers": {"name": "All Customers", "href": "/customers", "required_roles": [ROLE_ADMIN]},
    "customerReviews": {"name": "Reviews", "href": "/customers?view=reviews", "required_roles": [ROLE_ADMIN]},
    "customerRoutines": {"name": "Routines", "href": "/customers?view=routines", "required_roles": [ROLE_ADMIN]},
    "companies": {
        "name": "Companies",
        "href": "/companies",
        "required_roles": [ROLE_ADMIN],
        "required_permission": _any("companies", "view"),
    },
    "brandPartners": {"name": "Brand Partners", "children": ["brandDiscover", "companies", "brandOnboarding"]},
    "brandDiscover": {"name": "Brands", "href": "/brands", "required_permission": _any("brands", "view")},
    "brandOnboarding": {"name": "Onboarding", "href": "/onboard/company", "required_roles": [ROLE_ADMIN]},
    "productCategories": {"name": "Product Categories", "href": "/master/product-category", "required_roles": [ROLE_ADMIN]},
    "productTags": {"name": "Product Tags", "href": "/master/product-tag", "required_roles": [ROLE_ADMIN]},
    "productAttributes": {"name": "Product Attributes", "href": "/master/product-attribute", "required_roles": [ROLE_ADMIN]},
    "discountCoupons": {"name": "Discount Coupons", "href": "/master/discount-coupon", "required_roles": [ROLE_ADMIN]},
    "marketing": {"name": "Marketing", "children": ["discountCoupons", "promotions", "surveys"]},
    "analytics": {"name": "Analytics", "icon": "chart-bar", "children": ["platform", "brand", "ecommerce", "ingredients"]},
    "platform": {"name": "Platform", "href": "/analytics/platform", "required_roles": [ROLE_ADMIN]},
    "brand": {"name": "Brand", "href": "/analytics/brand", "required_roles": [ROLE_ADMIN]},
    "ecommerce": {"name": "Ecommerce", "href": "/analytics/ecommerce", "required_roles": [ROLE_ADMIN]},
    "ingredients": {"name": "Ingredients", "href": "/analytics/ingredient", "required_roles": [ROLE_ADMIN]},
    "app": {"name": "App", "children": ["formulationLooker", "chat", "faceAnalysis"]},
    "surveys": {"name": "Surveys", "href": "/surveys", "required_roles": [ROLE_ADMIN]},
    "promotions": {"name": "Promotions", "href": "/promo", "required_roles": [ROLE_ADMIN]},
    "formulationLooker": {"name": "Formulation Looker", "href": "/ingredient-details", "required_roles": [ROLE_ADMIN]},
    "chat": {"name": "Chat", "href": "/chat", "required_roles": [ROLE_ADMIN]},
    "faceAnalysis": {"name": "Face Analysis", "href": "/face-analysis", "required_roles": [ROLE_ADMIN]},
    "settings": {"name": "Settings", "children": ["userRolesPermissions"]},
    "userRolesPermissions": {
        "name": "User Roles & Permissions",
        "href": "/settings/user-roles-permissions",
        "required_roles": [ROLE_ADMIN],
        "required_permission": _any("users", "view"),
    },
}

SELLER_NODES: dict[str, dict] = {
    "sidebar": {
        "name": "sidebar",
        "children": ["dashboard", "orders", "products", "brands", "marketing", "analytics", "users", "settings"],
    },
    "dashboard": {"name": "dashboard", "href": "/", "icon": "home"},
    # also a link: the folder opens the product list
    "products": {"name": "products", "href": "/products", "icon": "shopping-bag", "children": ["all-products", "catalog"]},
    "all-products": {"name": "All Products", "href": "/products"},
    "catalog": {"name": "Catalog", "href": "/catalog"},
    "orders": {"name": "orders", "href": "/orders", "icon": "shopping-bag"},
    "brands": {"name": "brands", "href": "/brands"},
    "marketing": {"name": "marketing", "children": ["discount-coupons"]},
    "discount-coupons": {"name": "Discount Coupons", "href": "/marketing/discount-coupons"},
    "analytics": {
        "name": "analytics",
        "icon": "chart-bar",
        "children": ["platform-analytics", "brand-analytics", "ecommerce-analytics", "ingredient-analytics"],
    },
    "platform-analytics": {"name": "Platform", "href": "/analytics/platform"},
    "brand-analytics": {"name": "Brand", "href": "/analytics/brand"},
    "ecommerce-analytics": {"name": "Ecommerce", "href": "/analytics/ecommerce"},
    "ingredient-analytics": {"name": "Ingredient", "href": "/analytics/ingredient-insights"},
    "users": {"name": "users", "href": "/users", "icon": "user"},
    "settings": {"name": "settings", "children": ["permissions-settings", "preferences-settings"]},
    "permissions-settings": {"name": "Permissions", "href": "/settings/permissions"},
    "preferences-settings": {"name": "Preferences", "href": "/settings/preferences"},
}

DOCTOR_NODES: dict[str, dict] = {
    "sidebar": {
        "name": "sidebar",
        "children": ["dashboard", "chatroom", "brandconnect", "promotion", "community", "content", "analytics", "rewards"],
    },
    "dashboard": {"name": "Dashboard", "href": "/", "icon": "home"},
    "chatroom": {"name": "Chatroom", "href": "/chatroom"},
    "brandconnect": {"name": "BrandConnect", "children": ["brandconnect-survey", "brandconnect-inquiry"]},
    "brandconnect-survey": {"name": "Survey", "href": "/brandconnect/survey"},
    "brandconnect-inquiry": {"name": "Inquiry", "href": "/brandconnect/inquiry"},
    "promotion": {"name": "Promotion", "href": "/promotion"},
    "community": {"name": "Community (Educate)", "href": "/community"},
    "content": {"name": "Create Content", "href": "/content/create"},
    "analytics": {"name": "CMS Analytics", "href": "/analytics/cms", "icon": "chart-bar"},
    "rewards": {"name": "Rewards", "children": ["rewards-survey", "rewards-customer-transfer"]},
    "rewards-survey": {"name": "Survey Rewards", "href": "/rewards/survey"},
    "rewards-customer-transfer": {"name": "Customer Transfer", "href": "/rewards/customer-transfer"},
}

DISTRIBUTOR_NODES: dict[str, dict] = {
    "sidebar": {
        "name": "sidebar",
        "children": [
            "dashboard",
            "orders",
            "inventory",
            "retailer",
            "products",
            "logistics",
            "marketing",
            "brand-connect",
            "crm",
            "analytics",
            "finance",
        ],
    },
    "dashboard": {"name": "Dashboard", "href": "/", "icon": "home"},
    "orders": {
        "name": "Orders",
        "icon": "shopping-bag",
        "children": ["all-orders", "pending-orders", "tracking", "returns", "invoices"],
    },
    "all-orders": {"name": "All Orders", "href": "/orders"},
    "pending-orders": {"name": "Pending Orders", "href": "/orders/pending"},
    "tracking": {"name": "Shipment Tracking", "href": "/orders/tracking"},
    "returns": {"name": "Returns & Replacements", "href": "/orders/returns"},
    "invoices": {"name": "Invoices", "href": "/orders/invoices"},
    "inventory": {
        "name": "Inventory Management",
        "children": ["current-stock", "replenishment", "expiry-tracking", "low-stock-alerts", "batch-wise"],
    },
    "current-stock": {"name": "Current Stock", "href": "/inventory/current-stock"},
    "replenishment": {"name": "Stock Replenishment", "href": "/inventory/replenishment"},
    "expiry-tracking": {"name": "Expiry Tracking", "href": "/inventory/expiry-tracking"},
    "low-stock-alerts": {"name": "Low Stock Alerts", "href": "/inventory/low-stock-alerts"},
    "batch-wise": {"name": "Batch-wise Inventory", "href": "/inventory/batch-wise"},
    "retailer": {
        "name": "Retailer/Dealer Management",
        "children": ["retailer-directory", "onboarding", "retailer-orders", "credit-limits", "visit-logs"],
    },
    "retailer-directory": {"name": "Retailer Directory", "href": "/retailer/directory"},
    "onboarding": {"name": "Onboarding Retailers", "href": "/retailer/onboarding"},
    "retailer-orders": {"name": "Retailer Orders", "href": "/retailer/orders"},
    "credit-limits": {"name": "Credit Limits", "href": "/retailer/credit-limits"},
    "visit-logs": {"name": "Visit Logs", "href": "/retailer/visit-logs"},
    "products": {"name": "Products", "children": ["product-catalog", "price-lists", "skus", "product-promotions"]},
    "product-catalog": {"name": "Product Catalog", "href": "/products/catalog"},
    "price-lists": {"name": "Price Lists", "href": "/products/price-lists"},
    "skus": {"name": "Distributor-specific SKUs", "href": "/products/skus"},
    "product-promotions": {"name": "Promotions & Offers", "href": "/products/promotions"},
    "logistics": {
        "name": "Logistics",
        "children": ["route-planning", "logistics-tracking", "dispatch-history", "delivery-personnel"],
    },
    "route-planning": {"name": "Delivery Route Planning", "href": "/logistics/route-planning"},
    "logistics-tracking": {"name": "Shipment Tracking", "href": "/logistics/tracking"},
    "dispatch-history": {"name": "Dispatch History", "href": "/logistics/dispatch-history"},
    "delivery-personnel": {"name": "Delivery Personnel Management", "href": "/logistics/delivery-personnel"},
    "marketing": {
        "name": "Marketing / Promotions",
        "children": ["promo-campaigns", "distributor-coupons", "schemes", "posm-requests"],
    },
    "promo-campaigns": {"name": "Promo Campaigns", "href": "/marketing/promo-campaigns"},
    "distributor-coupons": {"name": "Distributor Coupons", "href": "/marketing/coupons"},
    "schemes": {"name": "Scheme Management (Buy X Get Y)", "href": "/marketing/schemes"},
    "posm-requests": {"name": "POSM Material Requests", "href": "/marketing/posm-requests"},
    "brand-connect": {
        "name": "Brand Connect",
        "children": ["manufacturer-communications", "product-updates", "training-materials", "new-launches"],
    },
    "manufacturer-communications": {"name": "Manufacturer Communications", "href": "/brand-connect/communications"},
    "product-updates": {"name": "Product Updates", "href": "/brand-connect/product-updates"},
    "training-materials": {"name": "Training Materials", "href": "/brand-connect/training-materials"},
    "new-launches": {"name": "New Launch Notifications", "href": "/brand-connect/new-launches"},
    "crm": {
        "name": "CRM & Support",
        "children": ["lead-management", "retailer-issues", "ticketing-system", "feedback-collection"],
    },
    "lead-management": {"name": "Lead Management", "href": "/crm/leads"},
    "retailer-issues": {"name": "Retailer Issues", "href": "/crm/retailer-issues"},
    "ticketing-system": {"name": "Ticketing System", "href": "/crm/ticketing"},
    "feedback-collection": {"name": "Feedback Collection", "href": "/crm/feedback"},
    "analytics": {
        "name": "Analytics",
        "icon": "chart-bar",
        "children": [
            "sales-analytics",
            "area-insights",
            "retailer-insights",
            "product-demand",
            "stock-movement",
            "margin-analytics",
        ],
    },
    "sales-analytics": {"name": "Sales Analytics", "href": "/analytics/sales"},
    "area-insights": {"name": "Area/Region Insights", "href": "/analytics/area-insights"},
    "retailer-insights": {"name": "Retailer Insights", "href": "/analytics/retailer-insights"},
    "product-demand": {"name": "Product Demand Trends", "href": "/analytics/product-demand"},
    "stock-movement": {"name": "Stock Movement Reports", "href": "/analytics/stock-movement"},
    "margin-analytics": {"name": "Margin Analytics", "href": "/analytics/margin"},
    "finance": {"name": "Finance", "children": ["payments", "credit-notes", "outstanding", "ledger", "commission"]},
    "payments": {"name": "Payments", "href": "/finance/payments"},
    "credit-notes": {"name": "Credit Notes", "href": "/finance/credit-notes"},
    "outstanding": {"name": "Outstanding Balances", "href": "/finance/outstanding"},
    "ledger": {"name": "Distributor Ledger", "href": "/finance/ledger"},
    "commission": {"name": "Commission Statements", "href": "/finance/commission"},
}

MANUFACTURER_NODES: dict[str, dict] = {
    "sidebar": {
        "name": "sidebar",
        "children": [
            "dashboard",
            "products",
            "production",
            "inventory",
            "orders",
            "suppliers",
            "compliance",
            "brand-collaboration",
            "marketing",
            "analytics",
            "communication",
            "finance",
            "settings",
        ],
    },
    "dashboard": {"name": "Dashboard", "href": "/", "icon": "home"},
    "products": {
        "name": "Product Management",
        "children": [
            "all-products",
            "formulations",
            "ingredients-library",
            "bom",
            "packaging-specs",
            "variants",
            "regulatory",
        ],
    },
    "all-products": {"name": "All Products", "href": "/products/all"},
    "formulations": {"name": "Product Formulations", "href": "/products/formulations"},
    "ingredients-library": {"name": "Ingredients Library", "href": "/products/ingredients-library"},
    "bom": {"name": "Raw Material Requirements (BOM)", "href": "/products/bom"},
    "packaging-specs": {"name": "Packaging Specifications", "href": "/products/packaging"},
    "variants": {"name": "Product Variants", "href": "/products/variants"},
    "regulatory": {"name": "Regulatory Documents", "href": "/products/regulatory"},
    "production": {
        "name": "Production & Batch",
        "children": [
            "create-batch",
            "batch-tracking",
            "quality-reports",
            "scheduling",
            "batch-allocation",
            "capacity-planner",
            "equipment-utilization",
        ],
    },
    "create-batch": {"name": "Create Batch", "href": "/production/create-batch"},
    "batch-tracking": {"name": "Batch Tracking", "href": "/production/batch-tracking"},
    "quality-reports": {"name": "Batch Quality Reports", "href": "/production/quality-reports"},
    "scheduling": {"name": "Production Scheduling", "href": "/production/scheduling"},
    "batch-allocation": {"name": "Batch Allocation to Distributors", "href": "/production/batch-allocation"},
    "capacity-planner": {"name": "Factory Capacity Planner", "href": "/production/capacity-planner"},
    "equipment-utilization": {"name": "Equipment Utilization", "href": "/production/equipment-utilization"},
    "inventory": {
        "name": "Inventory",
        "children": [
            "raw-material-inventory",
            "packaging-inventory",
            "finished-goods",
            "low-stock-alerts",
            "expiry-management",
            "supplier-sync",
        ],
    },
    "raw-material-inventory": {"name": "Raw Material Inventory", "href": "/inventory/raw-material"},
    "packaging-inventory": {"name": "Packaging Inventory", "href": "/inventory/packaging"},
    "finished-goods": {"name": "Finished Goods Inventory", "href": "/inventory/finished-goods"},
    "low-stock-alerts": {"name": "Low Stock Alerts", "href": "/inventory/low-stock-alerts"},
    "expiry-management": {"name": "Expiry Management", "href": "/inventory/expiry-management"},
    "supplier-sync": {"name": "Supplier Inventory Sync", "href": "/inventory/supplier-sync"},
    "orders": {
        "name": "Orders",
        "icon": "shopping-bag",
        "children": [
            "purchase-orders",
            "distributor-orders",
            "fulfillment",
            "packing-slips",
            "invoices",
            "shipping",
        ],
    },
    "purchase-orders": {"name": "Purchase Orders (Incoming)", "href": "/orders/purchase-orders"},
    "distributor-orders": {"name": "Distributor Orders (Outgoing)", "href": "/orders/distributor-orders"},
    "fulfillment": {"name": "Order Fulfillment", "href": "/orders/fulfillment"},
    "packing-slips": {"name": "Order Packing Slips", "href": "/orders/packing-slips"},
    "invoices": {"name": "Invoices & Billing", "href": "/orders/invoices"},
    "shipping": {"name": "Shipping & Logistics", "href": "/orders/shipping"},
    "suppliers": {
        "name": "Supplier Management",
        "children": [
            "approved-suppliers",
            "raw-material-suppliers",
            "packaging-suppliers",
            "supplier-onboarding",
            "supplier-ratings",
            "supplier-compliance",
        ],
    },
    "approved-suppliers": {"name": "Approved Suppliers", "href": "/suppliers/approved"},
    "raw-material-suppliers": {"name": "Raw Material Suppliers", "href": "/suppliers/raw-material"},
    "packaging-suppliers": {"name": "Packaging Suppliers", "href": "/suppliers/packaging"},
    "supplier-onboarding": {"name": "Supplier Onboarding", "href": "/suppliers/onboarding"},
    "supplier-ratings": {"name": "Supplier Ratings", "href": "/suppliers/ratings"},
    "supplier-compliance": {"name": "Compliance Docs", "href": "/suppliers/compliance"},
    "compliance": {
        "name": "Compliance & QA",
        "children": [
            "qa-reports",
            "stability-studies",
            "safety-sheets",
            "audit-logs",
            "checklists",
            "recall-management",
        ],
    },
    "qa-reports": {"name": "QA/QC Reports", "href": "/compliance/qa-reports"},
    "stability-studies": {"name": "Stability Studies", "href": "/compliance/stability-studies"},
    "safety-sheets": {"name": "Ingredient Safety Sheets", "href": "/compliance/safety-sheets"},
    "audit-logs": {"name": "Audit Logs", "href": "/compliance/audit-logs"},
    "checklists": {"name": "ISO/GMP Checklists", "href": "/compliance/checklists"},
    "recall-management": {"name": "Product Recall Management", "href": "/compliance/recall-management"},
    "brand-collaboration": {
        "name": "Brand Collaboration",
        "children": ["oem-requests", "brand-briefs", "formulation-requests", "sampling-requests", "contracts"],
    },
    "oem-requests": {"name": "OEM/White-label Requests", "href": "/brand-collaboration/oem-requests"},
    "brand-briefs": {"name": "Brand Briefs", "href": "/brand-collaboration/brand-briefs"},
    "formulation-requests": {"name": "Formulation Requests", "href": "/brand-collaboration/formulation-requests"},
    "sampling-requests": {"name": "Sampling Requests", "href": "/brand-collaboration/sampling-requests"},
    "contracts": {"name": "NDA/Contracts Manager", "href": "/brand-collaboration/contracts"},
    "marketing": {
        "name": "Marketing Support",
        "children": ["media-files", "marketing-kits", "content-library", "claims-approval"],
    },
    "media-files": {"name": "Product Media Files", "href": "/marketing/media-files"},
    "marketing-kits": {"name": "Marketing Kit Downloads", "href": "/marketing/marketing-kits"},
    "content-library": {"name": "Product Content Library", "href": "/marketing/content-library"},
    "claims-approval": {"name": "Claims Approval Workflow", "href": "/marketing/claims-approval"},
    "analytics": {
        "name": "Analytics",
        "icon": "chart-bar",
        "children": [
            "production-analytics",
            "raw-material-forecast",
            "cogs",
            "equipment-efficiency",
            "demand-forecast",
            "sku-performance",
        ],
    },
    "production-analytics": {"name": "Production Analytics", "href": "/analytics/production"},
    "raw-material-forecast": {"name": "Raw Material Forecasting", "href": "/analytics/raw-material-forecast"},
    "cogs": {"name": "Cost of Goods (COGS)", "href": "/analytics/cogs"},
    "equipment-efficiency": {"name": "Equipment Efficiency", "href": "/analytics/equipment-efficiency"},
    "demand-forecast": {"name": "Distributor Demand Forecast", "href": "/analytics/demand-forecast"},
    "sku-performance": {"name": "SKU Performance", "href": "/analytics/sku-performance"},
    "communication": {"name": "Communication", "children": ["brand-chats", "distributor-chats", "support-tickets"]},
    "brand-chats": {"name": "Brand Chats", "href": "/communication/brand-chats"},
    "distributor-chats": {"name": "Distributor Chats", "href": "/communication/distributor-chats"},
    "support-tickets": {"name": "Support Tickets", "href": "/communication/support-tickets"},
    "finance": {
        "name": "Finance",
        "children": ["payouts", "expense-tracking", "cost-sheets", "pricing-management"],
    },
    "payouts": {"name": "Payouts", "href": "/finance/payouts"},
    "expense-tracking": {"name": "Expense Tracking", "href": "/finance/expense-tracking"},
    "cost-sheets": {"name": "Cost Sheets", "href": "/finance/cost-sheets"},
    "pricing-management": {"name": "Pricing Management", "href": "/finance/pricing-management"},
    "settings": {
        "name": "Settings",
        "children": ["user-roles", "factory-profile", "api-integrations", "notification-settings"],
    },
    "user-roles": {"name": "User Roles & Permissions", "href": "/settings/user-roles"},
    "factory-profile": {"name": "Factory Profile", "href": "/settings/factory-profile"},
    "api-integrations": {"name": "API Integrations", "href": "/settings/api-integrations"},
    "notification-settings": {"name": "Notification Settings", "href": "/settings/notifications"},
}


def builtin_families(root_id: str = "sidebar") -> dict[str, FamilyDefinition]:
    return {
        ROLE_ADMIN: FamilyDefinition(ROLE_ADMIN, build_tree(ADMIN_NODES, root_id), frozenset({ROLE_ADMIN})),
        ROLE_SELLER: FamilyDefinition(ROLE_SELLER, build_tree(SELLER_NODES, root_id), frozenset({ROLE_SELLER})),
        ROLE_DOCTOR: FamilyDefinition(ROLE_DOCTOR, build_tree(DOCTOR_NODES, root_id), frozenset({ROLE_DOCTOR})),
        ROLE_DISTRIBUTOR: FamilyDefinition(
            ROLE_DISTRIBUTOR, build_tree(DISTRIBUTOR_NODES, root_id), frozenset({ROLE_DISTRIBUTOR})
        ),
        ROLE_MANUFACTURER: FamilyDefinition(
            ROLE_MANUFACTURER, build_tree(MANUFACTURER_NODES, root_id), frozenset({ROLE_MANUFACTURER})
        ),
    }


@dataclass(frozen=True)
class NavigationRegistry:
    """Role-family trees, selected wholesale by viewer role before filtering."""

    families: Mapping[str, FamilyDefinition] = field(default_factory=dict)
    default_family: str = ROLE_SELLER

    def names(self) -> list[str]:
        return list(self.families)

    def get(self, family: str) -> FamilyDefinition | None:
        return self.families.get(family)

    def family_for_role(self, role: str | None) -> FamilyDefinition | None:
        if role is not None:
            for definition in self.families.values():
                if role in definition.roles:
                    return definition
        return self.families.get(self.default_family)

    def tree_for_role(self, role: str | None) -> NavigationTree | None:
        definition = self.family_for_role(role)
        return definition.tree if definition is not None else None

    def merged(self, overrides: Mapping[str, FamilyDefinition]) -> "NavigationRegistry":
        families = dict(self.families)
        families.update(overrides)
        return NavigationRegistry(families=families, default_family=self.default_family)


__all__ = [
    "ADMIN_NODES",
    "DISTRIBUTOR_NODES",
    "DOCTOR_NODES",
    "MANUFACTURER_NODES",
    "NavigationRegistry",
    "ROLE_ADMIN",
    "ROLE_DISTRIBUTOR",
    "ROLE_DOCTOR",
    "ROLE_MANUFACTURER",
    "ROLE_SELLER",
    "SELLER_NODES",
    "builtin_families",
]
