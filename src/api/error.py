from typing import Mapping, NoReturn

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Every business failure of the signup workflow is a 400; the message is
# deliberately coarse for token and re-authentication failures.
SIGNUP_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "EMAIL_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "SIGNUP_SESSION_EXPIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_SIGNUP_STATE": status.HTTP_400_BAD_REQUEST,
    "INVALID_SIGNUP_CREDENTIALS": status.HTTP_400_BAD_REQUEST,
    "TERMS_NOT_ACCEPTED": status.HTTP_400_BAD_REQUEST,
}

AUTH_ERROR_STATUS = {
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
}

COMPANY_ERROR_STATUS = {
    "COMPANY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error, client_statuses: Mapping[str, int]) -> NoReturn:
    """Raise ClientError for a known business error code, ServerError otherwise"""
    if error.code in client_statuses:
        raise ClientError(error, status_code=client_statuses[error.code])
    raise ServerError(error)
