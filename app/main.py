"""Greeter: single-route FastAPI application."""

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes_greeting import router as greeting_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)


# No docs or schema routes: "/" is the only path served
app = FastAPI(
    title="Greeter",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Mount routers
app.include_router(greeting_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_for_unrouted_methods(request: Request, exc: StarletteHTTPException):
    """Answer a known path hit with the wrong method as 404 rather than 405."""
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)
