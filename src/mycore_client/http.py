"""Mapping of unsuccessful HTTP responses onto the exception hierarchy."""

from __future__ import annotations

import httpx

from mycore_client.exceptions import (
    PermissionDeniedError,
    ResourceNotFoundError,
    TransportError,
    UnauthorizedError,
)

_STATUS_ERRORS: dict[int, type[TransportError]] = {
    401: UnauthorizedError,
    403: PermissionDeniedError,
    404: ResourceNotFoundError,
}


def raise_for_response(response: httpx.Response, message: str) -> None:
    """Raise a :class:`TransportError` subclass unless ``response`` is 2xx.

    Parameters:
        response: The received response.
        message: Description of the failed operation, used as the error message.

    Raises:
        UnauthorizedError: For status 401.
        PermissionDeniedError: For status 403.
        ResourceNotFoundError: For status 404.
        TransportError: For any other non-2xx status.
    """
    if response.is_success:
        return
    error_cls = _STATUS_ERRORS.get(response.status_code, TransportError)
    raise error_cls(
        f"{message}: {response.status_code} {response.reason_phrase}",
        status=response.status_code,
        status_text=response.reason_phrase,
    )
