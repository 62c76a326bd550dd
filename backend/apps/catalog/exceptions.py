"""Catalog error kinds.

Every failure leaving the catalog services is one of these
``ApplicationError`` subclasses, which the API exception handler renders
as the standard error envelope.
"""
from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from django.db import DatabaseError, IntegrityError

from apps.api.exceptions import ApplicationError
from apps.common import get_logger

logger = get_logger(__name__).bind(component="catalog", layer="service")

F = TypeVar("F", bound=Callable[..., Any])


class ResourceNotFound(ApplicationError):
    default_code = "NOT_FOUND"

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(
            self.default_code,
            f"{resource} not found with {field}: {value}",
            details={field: str(value)},
        )
        self.resource = resource
        self.field = field
        self.value = value


class EmptyResult(ApplicationError):
    """A listing or search matched nothing where at least one row is required."""

    default_code = "NOT_FOUND"

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(self.default_code, message, details=details)


class ResourceConflict(ApplicationError):
    default_code = "CONFLICT"

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(self.default_code, message, details=details)


class CatalogValidationError(ApplicationError):
    default_code = "VALIDATION_ERROR"

    def __init__(self, errors: Dict[str, str], message: str = "Validation failed"):
        super().__init__(self.default_code, message, details=dict(errors))
        self.errors = dict(errors)


class StorageFailure(ApplicationError):
    default_code = "SERVICE_UNAVAILABLE"

    def __init__(self, message: str = "Catalog storage is unavailable"):
        super().__init__(self.default_code, message)


class ImageStorageFailure(ApplicationError):
    default_code = "SERVER_ERROR"

    def __init__(self, message: str = "Image could not be stored"):
        super().__init__(self.default_code, message)


def translate_storage_errors(func: F) -> F:
    """Re-raise database errors from a service call as catalog error kinds."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError as exc:
            logger.warning(
                "Integrity error translated to conflict",
                operation=func.__qualname__,
                error=str(exc),
            )
            raise ResourceConflict("Resource conflicts with existing data") from exc
        except DatabaseError as exc:
            logger.error(
                "Database error translated to storage failure",
                operation=func.__qualname__,
                error=str(exc),
            )
            raise StorageFailure() from exc

    return wrapper  # type: ignore[return-value]
