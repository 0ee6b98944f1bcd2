from fastapi import status

from acetrack.libs.result import Error

VALIDATION_CODES = frozenset(
    {
        "VALIDATION_ERROR",
        "EVENT_NOT_DELETED",
        "EVENT_NOT_OPEN",
        "CHECK_IN_WINDOW_CLOSED",
        "CHECK_OUT_WINDOW_CLOSED",
        "NOT_CHECKED_IN",
        "NOT_PENDING",
    }
)

FORBIDDEN_CODES = frozenset({"PERMISSION_DENIED", "PUBLIC_JOIN_DISABLED", "USER_INACTIVE"})

CONFLICT_CODES = frozenset(
    {
        "INVALID_TRANSITION",
        "ALREADY_OWNS_ORGANIZATION",
        "ORGANIZATION_NAME_EXISTS",
        "ALREADY_MEMBER",
        "JOIN_REQUEST_PENDING",
        "ORGANIZATION_FULL",
        "SUBSCRIPTION_EXISTS",
        "ALREADY_CHECKED_IN",
        "ALREADY_CHECKED_OUT",
    }
)


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def to_http_error(error: Error) -> Exception:
    """Map a use case Error to the ClientError/ServerError the handlers render"""
    if error.code.endswith("_NOT_FOUND"):
        return ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code in VALIDATION_CODES:
        return ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in FORBIDDEN_CODES:
        return ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code in CONFLICT_CODES:
        return ClientError(error, status_code=status.HTTP_409_CONFLICT)
    return ServerError(error)
