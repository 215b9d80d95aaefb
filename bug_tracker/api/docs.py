# bug_tracker/api/docs.py
"""
Human-facing API docs. The OpenAPI JSON itself is served by FastAPI at
OPENAPI_PATH; this module adds the Scalar reference page on top of it.
"""

from typing import Any, Dict

from fastapi import APIRouter, FastAPI
from fastapi.responses import HTMLResponse
from scalar_fastapi import get_scalar_api_reference

from bug_tracker.config import API_TITLE, OPENAPI_URL, SCALAR_PATH

router = APIRouter()


def describe(app: FastAPI) -> Dict[str, Any]:
    """
    Return the OpenAPI document for every route the app exposes in its schema.
    Raises if a declared response or body schema cannot be resolved.
    """
    return app.openapi()


def render_docs_page(openapi_url: str, title: str = API_TITLE) -> HTMLResponse:
    return get_scalar_api_reference(openapi_url=openapi_url, title=title)


@router.get(SCALAR_PATH, include_in_schema=False)
def scalar_docs() -> HTMLResponse:
    return render_docs_page(OPENAPI_URL)
