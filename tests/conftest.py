import os
import sys
import pathlib

import pytest

# Ensure project root is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("SHOP_URL", "test-shop.myshopify.com")
os.environ.setdefault("SHOP_TOKEN", "shpat_test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")


class FakeAdmin:
    """Records every graphql call and answers with canned or generated payloads."""

    def __init__(self, list_data=None, variants_on_create=1, create_error=None,
                 create_user_errors=None, update_user_errors=None, update_error=None):
        self.calls = []
        self.list_data = list_data
        self.variants_on_create = variants_on_create
        self.create_error = create_error
        self.create_user_errors = create_user_errors or []
        self.update_user_errors = update_user_errors or []
        self.update_error = update_error
        self._next_id = 1000

    def graphql(self, query, variables=None):
        self.calls.append((query, variables))
        if "productCreate" in query:
            if self.create_error:
                raise self.create_error
            if self.create_user_errors:
                return {"productCreate": {"product": None, "userErrors": self.create_user_errors}}
            self._next_id += 1
            edges = [
                {"node": {"id": f"gid://shopify/ProductVariant/{self._next_id}{i}"}}
                for i in range(self.variants_on_create)
            ]
            return {"productCreate": {
                "product": {"id": f"gid://shopify/Product/{self._next_id}", "variants": {"edges": edges}},
                "userErrors": [],
            }}
        if "productVariantsBulkUpdate" in query:
            if self.update_error:
                raise self.update_error
            return {"productVariantsBulkUpdate": {
                "product": {"id": variables["productId"]},
                "productVariants": [{"id": v["id"]} for v in variables["variants"]],
                "userErrors": self.update_user_errors,
            }}
        return self.list_data or list_response([])

    def calls_for(self, operation):
        return [c for c in self.calls if operation in c[0]]


def product_edge(num, title, status="ACTIVE", sku="SKU"):
    variants = [] if sku is None else [{"node": {"sku": sku}}]
    return {
        "cursor": f"cursor-{num}",
        "node": {
            "id": f"gid://shopify/Product/{num}",
            "title": title,
            "status": status,
            "variants": {"edges": variants},
        },
    }


def list_response(edges, has_next=False, has_previous=False):
    return {"products": {
        "edges": edges,
        "pageInfo": {
            "hasNextPage": has_next,
            "hasPreviousPage": has_previous,
            "startCursor": edges[0]["cursor"] if edges else None,
            "endCursor": edges[-1]["cursor"] if edges else None,
        },
    }}


@pytest.fixture
def fake_admin():
    return FakeAdmin()
