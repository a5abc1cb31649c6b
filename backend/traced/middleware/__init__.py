"""Middleware package for the Traced API."""
from .logging_middleware import RequestLoggingMiddleware
from .error_handler import (
    CatalogError,
    DomainError,
    InvalidFilterError,
    NotFoundError,
    register_error_handlers,
)

__all__ = [
    "RequestLoggingMiddleware",
    "register_error_handlers",
    "DomainError",
    "NotFoundError",
    "InvalidFilterError",
    "CatalogError",
]
