from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer undecodable request bodies with 400 instead of FastAPI's 422."""

    errors = jsonable_encoder(exc.errors())
    structlog.get_logger(__name__).warning("request_validation_failed", error_count=len(errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": errors})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
