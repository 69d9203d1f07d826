from typing import Dict, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Shared by every route: error codes that are not 400
STATUS_BY_CODE = {
    "MISSING_USER_HEADER": status.HTTP_401_UNAUTHORIZED,
    "INVALID_USER": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "EMAIL_NOT_VERIFIED": status.HTTP_403_FORBIDDEN,
    "TASK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "COOLDOWN": status.HTTP_429_TOO_MANY_REQUESTS,
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
    "TOO_MANY_ATTEMPTS": status.HTTP_429_TOO_MANY_REQUESTS,
}


def raise_for_error(error: Error, client_codes: set) -> None:
    """
    Raise ClientError for codes the route expects, ServerError otherwise.

    Status comes from STATUS_BY_CODE, defaulting to 400.
    """
    if error.code not in client_codes:
        raise ServerError(error)

    headers = None
    if "retry_after" in error.details:
        headers = {"Retry-After": str(error.details["retry_after"])}

    raise ClientError(
        error,
        status_code=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
        headers=headers,
    )
