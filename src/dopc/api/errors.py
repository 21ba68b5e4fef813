"""Translate price computation errors into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..services.pricing.errors import PriceError

logger = logging.getLogger(__name__)


def price_error_handler(request: Request, exc: PriceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error serving {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PriceError, price_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
