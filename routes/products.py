# routes/products.py

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

import schemas
from auth import authenticate_admin
from product_service import ProductService
from shopify_service import ShopifyService

PAGE_PATH = "/app"

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["Products"])


def get_product_service(admin: ShopifyService = Depends(authenticate_admin)) -> ProductService:
    return ProductService(admin)


def _render_page(request: Request, page: schemas.ProductPage, form: schemas.ProductForm,
                 result: Optional[schemas.ActionResult] = None) -> HTMLResponse:
    return templates.TemplateResponse(request, "products.html", {
        "title": "Manage Products",
        "page": page,
        "form": form,
        "result": result,
        "status_options": schemas.STATUS_OPTIONS,
        "page_path": PAGE_PATH,
    })


# ---------- page ----------

@router.get(PAGE_PATH, response_class=HTMLResponse, include_in_schema=False)
def get_products_page(
    request: Request,
    after: Optional[str] = Query(None),
    before: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
):
    page = service.list_products(after=after, before=before)
    # A cursor that lands on the first page is dropped in favour of the bare path.
    if not page.has_previous_page and request.url.query:
        return RedirectResponse(url=PAGE_PATH, status_code=303)
    return _render_page(request, page, schemas.ProductForm())


@router.post(PAGE_PATH, response_class=HTMLResponse, include_in_schema=False)
def submit_product_form(
    request: Request,
    title: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    sku: Optional[str] = Form(None),
    service: ProductService = Depends(get_product_service),
):
    result = service.create_product(title=title, status=status, sku=sku)
    if result.success:
        form = schemas.ProductForm()
    else:
        form = schemas.ProductForm(title=title or "", status=status or "DRAFT", sku=sku or "")
    page = service.list_products()
    return _render_page(request, page, form, result)


# ---------- JSON ----------

@router.get("/api/products", response_model=schemas.ProductPage)
def get_products(
    after: Optional[str] = Query(None),
    before: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
):
    """
    One page of products with the cursors for the neighbouring pages.
    """
    return service.list_products(after=after, before=before)


@router.post("/api/products", response_model=schemas.ActionResult, response_model_exclude_none=True)
def create_product(payload: schemas.ProductInput, service: ProductService = Depends(get_product_service)):
    """
    Create a product with one variant carrying the given SKU.
    """
    return service.create_product(title=payload.title, status=payload.status, sku=payload.sku)
