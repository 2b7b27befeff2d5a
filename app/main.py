# app/main.py
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import Settings
from .database import ProductStore
from .errors import register_error_handlers
from .middleware import ApiKeyMiddleware, ErrorFormatterMiddleware, RequestLoggerMiddleware
from .models import Product

logger = logging.getLogger("product_api")

GREETING = "Hello World! Go to /api/products to see all products."

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Root
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def root():
    return GREETING


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/api/products", response_model=List[Product])
async def list_products(store: ProductStore = Depends(get_store)):
    return await store.list()


@router.get("/api/products/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await store.get(product_id)


@router.post("/api/products", response_model=Product, status_code=201)
async def create_product(body: Any = Body(None), store: ProductStore = Depends(get_store)):
    return await store.create(body)


@router.put("/api/products/{product_id}", response_model=Product)
async def replace_product(
    product_id: str,
    body: Any = Body(None),
    store: ProductStore = Depends(get_store),
):
    # raw body: the store checks the id before looking at the payload
    return await store.replace(product_id, body)


@router.delete("/api/products/{product_id}", status_code=204, response_class=Response)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    await store.delete(product_id)
    return Response(status_code=204)


# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title=f"{settings.project_name} (in-memory demo)")
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    if not settings.api_key:
        logger.warning("API_KEY is not set; every /api request will be rejected")

    # Starlette wraps in reverse order: logger -> errors -> cors -> auth -> routes
    app.add_middleware(ApiKeyMiddleware, api_key=settings.api_key)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorFormatterMiddleware)
    app.add_middleware(RequestLoggerMiddleware)

    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()
