import logging

import httpx

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = 'Something went wrong with the API.'
NO_RESPONSE_MESSAGE = 'No response received from the API.'
UNKNOWN_ERROR_MESSAGE = 'An unknown error occurred'


class AppError(Exception):
    """
    Application error carrying the HTTP status it should be reported with.

    :param message: Human readable message returned to the caller.
    :param status_code: HTTP status code of the error response.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"AppError(message={self.message!r}, status_code={self.status_code})"


def _upstream_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return UPSTREAM_ERROR_MESSAGE
    if isinstance(payload, dict) and payload.get('status_message'):
        return str(payload['status_message'])
    return UPSTREAM_ERROR_MESSAGE


def handle_httpx_error(error: Exception) -> AppError:
    """
    Normalize a failure raised while talking to the upstream API.

    - The upstream responded with an error status: keep its status code and
      its ``status_message`` when there is one.
    - The request was sent but no response came back (timeout, connection
      failure): 503.
    - Anything else: 500 with the exception message.

    :param error: Exception raised by the upstream client.
    :return: AppError describing the failure.
    """
    if isinstance(error, AppError):
        return error

    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        status_code = response.status_code if response is not None else 500
        message = (
            _upstream_message(response) if response is not None
            else UPSTREAM_ERROR_MESSAGE
        )
        logger.warning("Upstream responded %s: %s", status_code, message)
        return AppError(message, status_code or 500)

    # UnsupportedProtocol is raised before anything is sent
    if (isinstance(error, httpx.TransportError)
            and not isinstance(error, httpx.UnsupportedProtocol)):
        logger.warning("No response from upstream: %r", error)
        return AppError(NO_RESPONSE_MESSAGE, 503)

    logger.warning("Upstream request failed: %r", error)
    return AppError(str(error) or UNKNOWN_ERROR_MESSAGE, 500)
