# schemas.py
from __future__ import annotations

from typing import Optional, List, Literal
from pydantic import BaseModel, Field, ConfigDict

ProductStatus = Literal["ACTIVE", "DRAFT", "ARCHIVED"]

STATUS_OPTIONS = [
    {"label": "Active", "value": "ACTIVE"},
    {"label": "Draft", "value": "DRAFT"},
    {"label": "Archived", "value": "ARCHIVED"},
]

# =========================
# Base model configurations
# =========================

class APIBase(BaseModel):
    """Base for models mapped to external API payloads."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

# ======================================================
# App-specific schemas (for page and API responses)
# ======================================================

class ProductEntry(BaseModel):
    id: str
    title: str
    status: str
    sku: str = ""
    cursor: Optional[str] = None
    admin_url: Optional[str] = None

class ProductPage(BaseModel):
    products: List[ProductEntry] = Field(default_factory=list)
    has_next_page: bool = False
    has_previous_page: bool = False
    next_cursor: Optional[str] = None
    prev_cursor: Optional[str] = None

class ProductForm(BaseModel):
    title: str = ""
    status: str = "DRAFT"
    sku: str = ""

class ProductInput(BaseModel):
    """Creation request body; null or omitted fields fall back to the creator defaults."""
    title: Optional[str] = None
    status: Optional[ProductStatus] = None
    sku: Optional[str] = None

class ActionResult(BaseModel):
    error: Optional[str] = None
    success: Optional[str] = None

# ======================================================
# Shopify GraphQL Ingest Models
# ======================================================

class UserError(APIBase):
    field: Optional[List[str]] = None
    message: str

class PageInfo(APIBase):
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_previous_page: bool = Field(..., alias="hasPreviousPage")
    start_cursor: Optional[str] = Field(None, alias="startCursor")
    end_cursor: Optional[str] = Field(None, alias="endCursor")

class VariantNode(APIBase):
    id: Optional[str] = None
    sku: Optional[str] = None

class VariantEdge(APIBase):
    node: VariantNode

class VariantConnection(APIBase):
    edges: List[VariantEdge] = Field(default_factory=list)

    def first(self) -> Optional[VariantNode]:
        return self.edges[0].node if self.edges else None

class ProductNode(APIBase):
    id: str
    title: Optional[str] = None
    status: Optional[str] = None
    variants: VariantConnection = Field(default_factory=VariantConnection)

class ProductEdge(APIBase):
    cursor: Optional[str] = None
    node: ProductNode

class ProductConnection(APIBase):
    edges: List[ProductEdge] = Field(default_factory=list)
    page_info: PageInfo = Field(..., alias="pageInfo")

class ProductCreatePayload(APIBase):
    product: Optional[ProductNode] = None
    user_errors: List[UserError] = Field(default_factory=list, alias="userErrors")

class VariantsBulkUpdatePayload(APIBase):
    product: Optional[dict] = None
    product_variants: Optional[List[VariantNode]] = Field(None, alias="productVariants")
    user_errors: List[UserError] = Field(default_factory=list, alias="userErrors")
