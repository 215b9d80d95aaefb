import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware

from bug_tracker import config
from bug_tracker.api.bugs import router as bugs_router
from bug_tracker.api.docs import describe, router as docs_router
from bug_tracker.db.store import BugStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


async def log_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(
        "Rejected %s %s: %d validation error(s)",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return await request_validation_exception_handler(request, exc)


def create_app(store: Optional[BugStore] = None) -> FastAPI:
    """
    Build the API. Without ``store`` the app opens its own BugStore at startup
    and closes it at shutdown. A store passed in belongs to the caller and is
    left open, so it survives restarts of the same app.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = store is None
        app.state.bug_store = BugStore() if owns_store else store

        # Fail fast if the schema can't be generated
        document = describe(app)
        logger.info("OpenAPI document ready (%d paths)", len(document["paths"]))

        logger.info("API running at %s", config.LOCAL_BASE_URL)
        logger.info("OpenAPI JSON at %s", config.OPENAPI_URL)
        logger.info("Scalar docs at %s%s", config.LOCAL_BASE_URL, config.SCALAR_PATH)
        logger.info("Environment: %s (public base URL %s)", config.APP_ENV, config.PUBLIC_BASE_URL)

        yield

        if owns_store:
            app.state.bug_store.close()

    app = FastAPI(
        title=config.API_TITLE,
        version=config.API_VERSION,
        description=config.API_DESCRIPTION,
        servers=[{"url": config.LOCAL_BASE_URL, "description": "Local server"}],
        openapi_url=config.OPENAPI_PATH,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, log_validation_error)

    @app.get("/health", include_in_schema=False)
    def health_check():
        return {"status": "ok"}

    app.include_router(bugs_router)
    app.include_router(docs_router)

    return app


app = create_app()


def run():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
