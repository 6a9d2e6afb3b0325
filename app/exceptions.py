import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class CatalogException(Exception):
    """
    Base exception for errors that map to a specific HTTP status.

    The API layer turns these into `{"message": ..., "details": ...}` bodies.
    """

    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict:
        """Convert exception to API response dict."""
        result = {"message": self.message}
        if self.details is not None:
            result["details"] = self.details
        return result


class EntityNotFoundError(CatalogException):
    """Raised when an entity with the given ID doesn't exist."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity} with ID {entity_id} not found",
            status_code=404,
        )
        self.entity = entity
        self.entity_id = entity_id


class BusinessRuleError(CatalogException):
    """Raised when a request is well-formed but breaks a business rule."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message=message, status_code=400, details=details)


async def catalog_exception_handler(request: Request, exc: CatalogException) -> JSONResponse:
    """Convert CatalogException to JSON response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Request body, path or query failed validation: 400 before any service call."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"message": "Validation failed", "details": errors}),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """
    Constraint violations reported by the database.

    Covers deleting a category that still owns products, referencing an
    unknown category and email collisions that slip past the service check.
    """
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content={"message": "The request conflicts with existing data"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors with full context and return an opaque 500."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred"},
    )
