"""Error types for the product API and the handlers that render them.

Every failure leaves the service as ``{"error": "<message>"}`` with the
matching status code.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger(__name__)


class ProductAPIError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(ProductAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized: Invalid API key"


class ProductValidationError(ProductAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid product"


class ProductNotFound(ProductAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Product not found"


class InternalError(ProductAPIError):
    pass


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductAPIError, product_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
