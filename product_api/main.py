# product_api/main.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import Settings, settings as default_settings
from .core import BODY_ERROR, ProductIn, validate_product
from .database import ProductStore, seed_products
from .errors import InternalError, ProductValidationError, error_response, register_error_handlers
from .logging_config import setup_logging
from .logic import (
    category_stats_logic, create_product_logic, delete_product_logic,
    get_product_logic, list_products_logic, update_product_logic,
)
from .security import api_key_gate

request_log = logging.getLogger("product_api.request")

WELCOME_MESSAGE = "Welcome to the Product API! Go to /products to view products."

# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> ProductStore:
    return request.app.state.store

async def valid_product(request: Request) -> ProductIn:
    try:
        payload = await request.json()
    except ValueError:
        raise ProductValidationError(BODY_ERROR)
    return validate_product(payload)

# ---------------------------
# Product endpoints
# ---------------------------
# /stats is declared before /{product_id} so the literal path wins.
# The x-api-key check runs as middleware (security.api_key_gate), ahead of routing.
router = APIRouter(prefix="/products", tags=["products"])

@router.get("")
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Page size, defaults to 5"),
    store: ProductStore = Depends(get_store),
) -> Dict[str, Any]:
    return list_products_logic(store, category, search, page, limit)

@router.get("/stats")
async def product_stats(store: ProductStore = Depends(get_store)) -> Dict[str, int]:
    return category_stats_logic(store)

@router.get("/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return get_product_logic(store, product_id)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductIn = Depends(valid_product), store: ProductStore = Depends(get_store)):
    return create_product_logic(store, payload)

@router.put("/{product_id}")
async def update_product(product_id: str, payload: ProductIn = Depends(valid_product),
                         store: ProductStore = Depends(get_store)):
    return update_product_logic(store, product_id, payload)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    delete_product_logic(store, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    if store is None:
        store = ProductStore(seed_products() if settings.seed_data else None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store

    # added first so CORS (outer) still answers preflight requests without a key
    app.middleware("http")(api_key_gate)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_log.info("%s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            request_log.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(InternalError.status_code, InternalError.message)
        request_log.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME_MESSAGE

    app.include_router(router)
    return app

app = create_app()

def run() -> None:
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port,
                log_level=default_settings.log_level.lower())

if __name__ == "__main__":
    run()
