"""
Application package.

``main`` builds the FastAPI app; ``core`` holds configuration,
logging, errors, locking and the JSON store; ``services`` holds the
validation rules and record operations; ``api`` holds the routes.
"""

from .main import app  # noqa: F401
