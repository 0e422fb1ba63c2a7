"""Mapping of domain and validation errors onto the API error envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from enslookup.api.schemas import APIError, ErrorDetail
from enslookup.core.exceptions import EnsLookupError, InvalidNameError

logger = logging.getLogger(__name__)


def error_response(error: EnsLookupError) -> JSONResponse:
    """Render a domain error: 400 for bad names, 500 for everything else."""
    status_code = 400 if isinstance(error, InvalidNameError) else 500
    return JSONResponse(
        status_code=status_code,
        content=APIError.from_exception(error).to_content(),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render malformed request bodies in the error envelope instead of FastAPI's 422."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    body = APIError(
        error=ErrorDetail(
            code="invalid_request",
            message="Request body is invalid",
            details={"errors": jsonable_encoder(exc.errors())},
        )
    )
    return JSONResponse(status_code=400, content=body.to_content())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
