from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from fastapi import FastAPI, APIRouter
from app.core.config import settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import setup_logging
from app.core.errors import register_exception_handlers
from app.db.session import init_db

# Routers
from app.api.routes.authors import router as authors_router


setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Bookstore API - authors, their books and prizes.",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

# Middlewares
app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to Bookstore API",
        "version": "1.0.0",
        "docs_url": "/docs",
        "api_v1_str": settings.API_V1_STR,
        "endpoints": {
            "authors": f"{settings.API_V1_STR}/authors",
        },
    }

register_exception_handlers(app)

# Mount routers
api = APIRouter(prefix=settings.API_V1_STR)
api.include_router(authors_router)
app.include_router(api)
