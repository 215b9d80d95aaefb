# app.py
"""
Thin entrypoint for running the API from the repository root.

Usage example:
    uvicorn app:app --port 3000 --reload
"""

from bug_tracker.main import app  # re-export FastAPI instance
