"""
Top‑level router.

Aggregates the endpoint routers.  When new areas are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import root, students

router = APIRouter()

router.include_router(root.router, tags=["health"])
router.include_router(students.router, prefix="/students", tags=["students"])
