# storeapi/main.py
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import uvicorn

from . import service
from .core import AddToCartIn, CheckoutIn, _error_body, _make_product_dict
from .database import SessionManager, Store
from .errors import InvalidParameter, MalformedPayload, ProductNotFound, StoreError
from .logging import get_logger
from .seed import seed_catalog
from .settings import STORE_HOST, STORE_PORT, STORE_SEED_CATALOG

logger = get_logger(__name__)


def create_app(store: Optional[Store] = None, sessions: Optional[SessionManager] = None) -> FastAPI:
    """Build the HTTP app around the given store and cart sessions.

    Handlers are plain functions, so FastAPI runs each request on its worker
    thread pool; the store and session locks are what keep them apart.
    """
    store = store if store is not None else Store()
    sessions = sessions if sessions is not None else SessionManager()

    app = FastAPI(title="store-api (in-memory demo)")
    app.state.store = store
    app.state.sessions = sessions

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------
    # Error mapping
    # ---------------------------
    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=exc.status_code, content=_error_body(str(exc)))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = tuple(first.get("loc", ()))
        if first.get("type") == "json_invalid" or loc == ("body",):
            err: StoreError = MalformedPayload()
        else:
            err = InvalidParameter(str(loc[-1]) if loc else "request")
        return JSONResponse(status_code=err.status_code, content=_error_body(str(err)))

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/products")
    def list_products():
        return [_make_product_dict(p) for p in store.list()]

    @app.get("/product")
    def get_product(product_id: int = Query(..., alias="id")):
        p = store.find_by_id(product_id)
        if p is None:
            raise ProductNotFound(product_id)
        return _make_product_dict(p)

    # ---------------------------
    # Cart endpoints
    # ---------------------------
    @app.post("/cart/add")
    def cart_add(payload: AddToCartIn):
        service.add_to_cart(store, sessions, payload.customer_id, payload.product_id, payload.qty)
        return {"ok": True}

    @app.get("/cart")
    def view_cart(customer_id: int = Query(..., alias="customerId")):
        return service.view_cart(sessions, customer_id).model_dump(by_alias=True)

    # ---------------------------
    # Checkout
    # ---------------------------
    @app.post("/checkout")
    def checkout(payload: CheckoutIn):
        try:
            order = service.checkout(store, sessions, payload.customer_id)
        except ProductNotFound as e:
            # a product vanishing under a cart is a bad checkout, not a bad URL
            return JSONResponse(status_code=400, content=_error_body(str(e)))
        return order.model_dump(by_alias=True)

    return app


def build_app() -> FastAPI:
    """Composition root used by the server: one store, one session manager."""
    store = Store()
    if STORE_SEED_CATALOG:
        seed_catalog(store)
    return create_app(store, SessionManager())


def run() -> None:
    logger.info("server listening on http://%s:%s", STORE_HOST, STORE_PORT)
    uvicorn.run(build_app(), host=STORE_HOST, port=STORE_PORT)


if __name__ == "__main__":
    run()
