# bug_tracker/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn bug_tracker:app --port 3000
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
