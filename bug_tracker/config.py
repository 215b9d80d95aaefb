"""
Configuration
=============
Loads environment variables (and a local .env file, if present) using
python-dotenv.

Environment Variables:
    APP_ENV     - "production" switches the public base URL (default: development)
    HOST        - Interface uvicorn binds to (default: 0.0.0.0, all interfaces)
    LOG_LEVEL   - Root logging level (default: INFO)

The server always listens on port 3000 and the docs page is always wired
to the local OpenAPI URL. PUBLIC_BASE_URL is only reported at startup
until a deployed domain exists.
"""
import os
from dotenv import load_dotenv

load_dotenv()

API_TITLE = "Bug Tracker API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Bug API built with FastAPI + Pydantic + OpenAPI"

APP_ENV = os.getenv("APP_ENV", "development")
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Fixed; every advertised URL below is built from it
PORT = 3000

LOCAL_BASE_URL = f"http://localhost:{PORT}"
PRODUCTION_BASE_URL = "https://your-api-domain.com"

OPENAPI_PATH = "/openapi"
SCALAR_PATH = "/scalar"
OPENAPI_URL = LOCAL_BASE_URL + OPENAPI_PATH


def resolve_base_url(app_env: str) -> str:
    if app_env == "production":
        return PRODUCTION_BASE_URL
    return LOCAL_BASE_URL


PUBLIC_BASE_URL = resolve_base_url(APP_ENV)
