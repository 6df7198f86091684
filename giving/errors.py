from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from giving.utils.texts import get_text


class CheckoutError(Exception):
    """Base error for a checkout request; carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CheckoutError):
    """Client input is missing or malformed. The caller can fix and retry."""

    status_code = 400


class ConfigurationError(CheckoutError):
    """The server lacks a required credential. Needs operator action."""

    status_code = 500


class UpstreamError(CheckoutError):
    """The payment provider call failed. Details stay in the server log."""

    status_code = 500


async def checkout_error_handler(request: Request, exc: CheckoutError):
    if isinstance(exc, UpstreamError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.bind(event="checkout.rejected", path=request.url.path).info("Invalid request body: {}", exc.errors())
    message = get_text("checkout", "invalid_body", "Invalid request body")
    return JSONResponse({"error": message}, status_code=400)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CheckoutError, checkout_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
