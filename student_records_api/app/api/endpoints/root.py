"""Liveness endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

BANNER = "Student API (file storage) running"


@router.get("/", response_class=PlainTextResponse)
def liveness() -> str:
    """Return a plain text banner so probes can tell the service is up."""
    return BANNER
