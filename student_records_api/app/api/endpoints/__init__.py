"""
Endpoint modules.

Each module defines an ``APIRouter`` for one area (student records,
liveness).  The routers are aggregated in ``api/router.py``.
"""
