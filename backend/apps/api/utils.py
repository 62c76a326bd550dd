from collections.abc import Mapping
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "PAYLOAD_TOO_LARGE": status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for_code(code: str) -> int:
    return ERROR_STATUS_MAP.get(code.strip().upper(), DEFAULT_ERROR_STATUS)


def _normalize_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return as_serializer_error(details)
    if isinstance(details, Mapping):
        return {str(key): value for key, value in details.items()}
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def error_response(
    code: str,
    message: Any,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, Any]] = None,
) -> Response:
    """
    Build the catalog error envelope::

        {"error": {"code": ..., "message": ..., "status": ..., "details": ...}}

    ``details`` is omitted when ``None``. The HTTP status comes from
    ``ERROR_STATUS_MAP`` unless ``http_status`` overrides it.
    """
    if not isinstance(code, str) or not code.strip():
        raise ValueError("error_response requires a non-empty string code")
    text = "" if message is None else str(message).strip()
    if not text:
        raise ValueError("error_response requires a non-empty message")

    status_code = int(http_status) if http_status is not None else status_for_code(code)
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    body: Dict[str, Any] = {
        "code": code.strip().upper(),
        "message": text,
        "status": status_code,
    }
    if details is not None:
        body["details"] = _normalize_details(details)

    return Response(
        {"error": body},
        status=status_code,
        headers={str(k): str(v) for k, v in headers.items()} if headers else None,
    )
