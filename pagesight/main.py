"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pagesight import __version__
from pagesight.config import settings
from pagesight.errors import PageSightError
from pagesight.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pagesight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def _failure_response() -> JSONResponse:
    # Fixed body: internal detail is logged, never returned
    return JSONResponse(status_code=500, content=ErrorResponse().model_dump(by_alias=True))


async def _pagesight_error_handler(request: Request, exc: PageSightError) -> JSONResponse:
    logger.error(
        "%s error on %s: %s",
        exc.kind,
        request.url.path,
        exc.reason,
        exc_info=exc.__cause__,
    )
    return _failure_response()


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return _failure_response()


def create_app() -> FastAPI:
    app = FastAPI(
        title="PageSight",
        description="Full-page web screenshots with gaze heatmap overlays",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PageSightError, _pagesight_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    from pagesight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
