"""
Storefront Application

Catalog browsing, a shared shopping cart and a mock checkout over an
in-memory relational store, plus a single-page client served at "/".
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .core.errors import StoreError
from .database.store import open_store
from .routes import products_router, cart_router, checkout_router

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

static_dir = os.path.join(os.path.dirname(__file__), "static")
templates_dir = os.path.join(os.path.dirname(__file__), "templates")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings: Settings = app.state.settings
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Products API: http://{settings.host}:{settings.port}{settings.api_prefix}/products")
    yield
    logger.info(f"{settings.app_name} shutting down...")
    app.state.store.dispose()


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # drop the leading "body"/"query"/"path" segment
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if field:
        return f"Invalid request: {field}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def register_error_handlers(app: FastAPI) -> None:
    """Translate errors into {"error": message} bodies"""

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and its store. Seeding failures abort startup."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Storefront demo: catalog, cart and mock checkout",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = open_store(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Static files and templates
    if os.path.exists(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    templates = Jinja2Templates(directory=templates_dir) if os.path.exists(templates_dir) else None

    # Include API routers
    app.include_router(products_router, prefix=settings.api_prefix)
    app.include_router(cart_router, prefix=settings.api_prefix)
    app.include_router(checkout_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def home(request: Request):
        """Storefront client page"""
        if templates:
            return templates.TemplateResponse(
                request=request,
                name="index.html",
                context={"title": settings.app_name, "api_base": settings.api_prefix},
            )
        return {
            "message": f"{settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "products": f"{settings.api_prefix}/products",
                "cart": f"{settings.api_prefix}/cart",
                "checkout": f"{settings.api_prefix}/checkout",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
