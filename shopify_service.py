# shopify_service.py
import logging
from typing import List, Optional, Dict, Any

import requests

from config import settings

logger = logging.getLogger("shopify")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(settings.log_level)


def gid_to_id(gid: Optional[str]) -> Optional[int]:
    if not gid:
        return None
    try:
        return int(str(gid).split('/')[-1])
    except (IndexError, ValueError):
        return None


def product_admin_url(store_url: str, product_gid: str) -> str:
    return f"https://{store_url}/admin/products/{gid_to_id(product_gid) or ''}"


ITEMS_PER_PAGE = 5

PRODUCT_LIST_FIELDS = """
    edges {
      cursor
      node {
        id
        title
        status
        variants(first: 1) {
          edges { node { sku } }
        }
      }
    }
    pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
"""


def build_list_products_query(backward: bool) -> str:
    """
    Product list document, newest first. Backward pages use last/before,
    forward pages use first/after; the cursor is always passed as $cursor.
    """
    if backward:
        window = f"last: {ITEMS_PER_PAGE}, before: $cursor"
    else:
        window = f"first: {ITEMS_PER_PAGE}, after: $cursor"
    return f"""
query ListProducts($cursor: String) {{
  products(sortKey: CREATED_AT, reverse: true, {window}) {{
{PRODUCT_LIST_FIELDS}
  }}
}}
"""


CREATE_PRODUCT_MUTATION = """
mutation CreateProduct($input: ProductInput!) {
  productCreate(input: $input) {
    product {
      id
      variants(first: 1) {
        edges { node { id } }
      }
    }
    userErrors { field message }
  }
}
"""

UPDATE_VARIANT_SKU_MUTATION = """
mutation productVariantsBulkUpdate($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkUpdate(productId: $productId, variants: $variants) {
    product { id }
    productVariants { id }
    userErrors { field message }
  }
}
"""


class ShopifyAPIError(ValueError):
    """Top-level GraphQL `errors` returned with an otherwise successful HTTP response."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        messages = [str(err.get("message")) for err in errors if isinstance(err, dict) and err.get("message")]
        super().__init__("; ".join(messages) or f"GraphQL API Error: {errors}")


class ShopifyService:
    def __init__(self, store_url: str, token: str, api_version: str = "2025-10", timeout: float = 30.0):
        if not all([store_url, token]):
            raise ValueError("Store URL and Access Token are required.")
        self.api_endpoint = f"https://{store_url}/admin/api/{api_version}/graphql.json"
        self.headers = {"Content-Type": "application/json", "X-Shopify-Access-Token": token}
        self.timeout = timeout

    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run one GraphQL document and return its `data` block.

        Transport failures raise requests exceptions, GraphQL-level errors raise
        ShopifyAPIError. Nothing is retried.
        """
        payload = {"query": query, "variables": variables or {}}
        logger.debug("graphql variables=%s", payload["variables"])
        response = requests.post(self.api_endpoint, headers=self.headers, json=payload, timeout=self.timeout)
        response.raise_for_status()
        json_response = response.json()
        if json_response.get("errors"):
            logger.warning("Shopify API Error Response: %s", json_response["errors"])
            raise ShopifyAPIError(json_response["errors"])
        return json_response.get("data") or {}
