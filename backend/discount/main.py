import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from discount.core.config import settings
from discount.core.correlation import CORRELATION_HEADER, CorrelationMiddleware
from discount.core.database import init_db
from discount.core.dependencies import get_mediator
from discount.core.logging import configure_logging
from discount.routers import discounts, health

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Discount", "description": "Look up, create, update and delete product discounts."},
    {"name": "Health", "description": "Liveness probe."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.LOG_LEVEL)
    init_db()
    # Fails startup if the handler table is incomplete
    get_mediator()
    logger.info("Discount API ready")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Discount microservice API",
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", CORRELATION_HEADER],
)
app.add_middleware(CorrelationMiddleware)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(discounts.router, prefix="/discount", tags=["Discount"])
app.include_router(
    discounts.router, prefix="/api/discount", tags=["Discount"], include_in_schema=False
)
app.include_router(health.router, tags=["Health"])


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    uvicorn.run("discount.main:app", host="0.0.0.0", port=8000)
