"""Greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello, World! Welcome to my AWS-hosted Web App 🚀"

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greet():
    """Return the greeting as plain text."""
    return GREETING
