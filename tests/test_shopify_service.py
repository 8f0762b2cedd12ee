import pytest
import requests

import shopify_service
from shopify_service import ShopifyAPIError, ShopifyService, build_list_products_query, gid_to_id


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.body


@pytest.fixture
def posts(monkeypatch):
    sent = []
    replies = []

    def fake_post(url, headers=None, json=None, timeout=None):
        sent.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return replies.pop(0)

    monkeypatch.setattr(shopify_service.requests, "post", fake_post)
    return sent, replies


def test_requires_store_and_token():
    with pytest.raises(ValueError):
        ShopifyService(store_url="", token="x")


def test_graphql_posts_document_and_returns_data(posts):
    sent, replies = posts
    replies.append(FakeResponse({"data": {"shop": {"name": "Test"}}}))
    service = ShopifyService("test-shop.myshopify.com", "shpat_x", api_version="2025-10", timeout=12)

    data = service.graphql("query { shop { name } }", {"a": 1})

    assert data == {"shop": {"name": "Test"}}
    assert sent[0]["url"] == "https://test-shop.myshopify.com/admin/api/2025-10/graphql.json"
    assert sent[0]["headers"]["X-Shopify-Access-Token"] == "shpat_x"
    assert sent[0]["json"] == {"query": "query { shop { name } }", "variables": {"a": 1}}
    assert sent[0]["timeout"] == 12


def test_graphql_errors_raise_without_retry(posts):
    sent, replies = posts
    replies.append(FakeResponse({"errors": [{"message": "Throttled", "extensions": {"code": "THROTTLED"}}]}))
    service = ShopifyService("test-shop.myshopify.com", "shpat_x")

    with pytest.raises(ShopifyAPIError, match="Throttled") as exc:
        service.graphql("query { shop { name } }")

    assert exc.value.errors[0]["extensions"]["code"] == "THROTTLED"
    assert len(sent) == 1


def test_http_errors_propagate(posts):
    _, replies = posts
    replies.append(FakeResponse({}, status_code=401))
    service = ShopifyService("test-shop.myshopify.com", "shpat_x")

    with pytest.raises(requests.exceptions.HTTPError):
        service.graphql("query { shop { name } }")


def test_list_query_directions():
    forward = build_list_products_query(backward=False)
    backward = build_list_products_query(backward=True)

    assert "products(sortKey: CREATED_AT, reverse: true, first: 5, after: $cursor)" in forward
    assert "products(sortKey: CREATED_AT, reverse: true, last: 5, before: $cursor)" in backward
    for query in (forward, backward):
        assert "pageInfo { hasNextPage hasPreviousPage startCursor endCursor }" in query
        assert "variants(first: 1)" in query


@pytest.mark.parametrize("gid,expected", [
    ("gid://shopify/Product/123", 123),
    (None, None),
    ("gid://shopify/Product/abc", None),
])
def test_gid_to_id(gid, expected):
    assert gid_to_id(gid) == expected
