"""Custom exception handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stickerpack.application.config import ManifestError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Request could not be parsed",
                "error_type": "request_validation",
                "details": jsonable_encoder(
                    [
                        {"loc": list(err.get("loc", ())), "message": err.get("msg")}
                        for err in exc.errors()
                    ]
                ),
            },
        )

    @app.exception_handler(ManifestError)
    async def manifest_error_handler(
        request: Request, exc: ManifestError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": jsonable_encoder(exc.details),
            },
        )
