# orderdesk/main.py

"""
Used by FastAPI to handle the Traffic (API endpoints)
This is the entry point for the API
It wires the routers, maps domain errors to HTTP and creates the tables on startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# For Middleware block so browser can access the API
from fastapi.middleware.cors import CORSMiddleware

import uvicorn

from orderdesk.config import configure_logging, settings
from orderdesk.errors import ConflictError, NotFoundError, OrderDeskError, ValidationError
from orderdesk.routers import customers, orders, products
from orderdesk.utils.db import init_db

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    NotFoundError: 404,
    ConflictError: 400,
    ValidationError: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Initializing database...")
    init_db()
    logger.info("Database ready.")
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description="Products, customers and orders over JSON",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products.router)
app.include_router(customers.router)
app.include_router(orders.router)


@app.exception_handler(OrderDeskError)
async def orderdesk_error_handler(request: Request, exc: OrderDeskError) -> JSONResponse:
    """Map OrderDeskError subclasses to appropriate HTTP responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are answered like any other ValidationError: 400, one readable message
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(
        status_code=400,
        content={"detail": "; ".join(messages), "error_type": ValidationError.__name__},
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    # If running directly, this allows 'python -m orderdesk.main' to work
    # BUT standard usage is 'uvicorn orderdesk.main:app --reload' from terminal
    uvicorn.run("orderdesk.main:app", host=settings.APP_HOST, port=settings.APP_PORT, reload=True)
