"""
HTTP exception utilities and app-wide error handlers.

Every error response has the shape {"message": str, "errors"?: list}.
"""

import logging
from typing import TypeVar

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_resource(resource: T | None, detail: str = "Resource not found") -> T:
    """
    Raise 404 if resource is None, otherwise return the resource.

    Usage:
        article = require_resource(store.get_article(id), "Article not found")
    """
    if resource is None:
        raise HTTPException(status_code=404, detail=detail)
    return resource


def require_article(article: T | None) -> T:
    """Raise 404 if article is None."""
    return require_resource(article, "Article not found")


def require_playlist(playlist: T | None) -> T:
    """Raise 404 if playlist is None."""
    return require_resource(playlist, "Playlist not found")


def require_podcast(podcast: T | None) -> T:
    """Raise 404 if podcast is None."""
    return require_resource(podcast, "Podcast not found")


def require_live_stream(stream: T | None) -> T:
    """Raise 404 if live stream is None."""
    return require_resource(stream, "Live stream not found")


def _validation_message(request: Request) -> str:
    """Name the payload that failed validation, e.g. 'Invalid favorite data'."""
    segments = [s for s in request.url.path.split("/") if s and s != "api"]
    resource = segments[0] if segments else "request"
    labels = {
        "articles": "article",
        "favorites": "favorite",
        "playlists": "playlist",
        "downloads": "download",
        "history": "progress",
        "shares": "share",
        "notifications": "notification",
    }
    return f"Invalid {labels.get(resource, resource)} data"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed input with 400 and field-level detail."""
    return JSONResponse(
        status_code=400,
        content={
            "message": _validation_message(request),
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
