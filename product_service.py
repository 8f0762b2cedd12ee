# product_service.py

import logging
from typing import Optional, List

from config import settings
from schemas import (
    ActionResult,
    ProductConnection,
    ProductCreatePayload,
    ProductEntry,
    ProductPage,
    UserError,
    VariantsBulkUpdatePayload,
)
from shopify_service import (
    CREATE_PRODUCT_MUTATION,
    UPDATE_VARIANT_SKU_MUTATION,
    ShopifyService,
    build_list_products_query,
    product_admin_url,
)

logger = logging.getLogger("products")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(settings.log_level)

SUCCESS_MESSAGE = "Product created successfully"


def _user_error_message(errors: List[UserError]) -> str:
    return "; ".join(e.message for e in errors)


class ProductService:
    """
    Lists products page by page and creates products with a single SKU'd variant,
    all through the admin client's graphql operation.
    """
    def __init__(self, admin: ShopifyService):
        self.admin = admin

    # -------------------- list loader --------------------
    def list_products(self, after: Optional[str] = None, before: Optional[str] = None) -> ProductPage:
        """
        Fetch one page of products, newest first.

        A `before` cursor wins over `after` and flips the query to last/before.
        Cursors are forwarded untouched. Errors are not handled here.
        """
        backward = bool(before)
        cursor = before if backward else after
        data = self.admin.graphql(build_list_products_query(backward), {"cursor": cursor})
        connection = ProductConnection.model_validate(data["products"])

        products = []
        for edge in connection.edges:
            node = edge.node
            variant = node.variants.first()
            products.append(ProductEntry(
                id=node.id,
                title=node.title or "",
                status=node.status or "",
                sku=(variant.sku if variant else None) or "",
                cursor=edge.cursor,
                admin_url=product_admin_url(settings.shop_url, node.id),
            ))

        page_info = connection.page_info
        return ProductPage(
            products=products,
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            next_cursor=page_info.end_cursor,
            prev_cursor=page_info.start_cursor,
        )

    # -------------------- product creator --------------------
    def create_product(self, title: Optional[str] = None, status: Optional[str] = None,
                       sku: Optional[str] = None) -> ActionResult:
        """
        Create a product from title and status, then set the SKU on its first variant.

        Never raises: the first failure (exception or userErrors) becomes the error
        message. A product whose SKU update fails stays created.
        """
        title = title if title is not None else ""
        status = status if status is not None else "DRAFT"
        sku = sku if sku is not None else ""

        try:
            data = self.admin.graphql(CREATE_PRODUCT_MUTATION, {"input": {"title": title, "status": status}})
            created = ProductCreatePayload.model_validate(data["productCreate"])
            if created.user_errors:
                raise ValueError(_user_error_message(created.user_errors))
            if created.product is None:
                raise ValueError("Product was not created")

            product = created.product
            logger.info("Product created: %s", product.id)
            variant = product.variants.first()

            if variant and variant.id:
                variables = {
                    "productId": product.id,
                    "variants": [{"id": variant.id, "inventoryItem": {"sku": sku}}],
                }
                data = self.admin.graphql(UPDATE_VARIANT_SKU_MUTATION, variables)
                updated = VariantsBulkUpdatePayload.model_validate(data["productVariantsBulkUpdate"])
                if updated.user_errors:
                    raise ValueError(_user_error_message(updated.user_errors))
            else:
                logger.debug("Product %s has no variant, SKU update skipped", product.id)

            return ActionResult(success=SUCCESS_MESSAGE)
        except Exception as e:
            logger.exception("create_product failed: %s", e)
            return ActionResult(error=str(e))
