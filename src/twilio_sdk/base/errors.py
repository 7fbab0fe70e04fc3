"""
Error mapping.

Turns a missing response into ApiConnectionError and a non-success response
into ApiError. Success responses are passed through untouched.
"""

from __future__ import annotations
from typing import NoReturn, Optional

from pydantic import BaseModel, ValidationError

from ..exceptions import ApiConnectionError, ApiError, RestExceptionParseError
from ..http.response import Response


class RestException(BaseModel):
    """Error envelope returned by the API for failed requests."""

    message: str
    code: Optional[int] = None
    more_info: Optional[str] = None
    status: Optional[int] = None

    model_config = {"extra": "ignore"}

    @classmethod
    def from_json(cls, content: bytes) -> RestException:
        """
        Parse an error body.

        Raises:
            pydantic.ValidationError: If the body is not a valid error envelope
        """
        return cls.model_validate_json(content)


def raise_connection_error(operation: str, cause: Optional[BaseException] = None) -> NoReturn:
    """Raise the error for an operation that received no response at all."""
    raise ApiConnectionError(f"{operation} failed: Unable to connect to server", cause=cause)


def raise_for_status(response: Response) -> NoReturn:
    """
    Raise the ApiError described by a failed response.

    The response is always closed, whether or not its body parses.

    Raises:
        ApiError: Built from the error envelope
        RestExceptionParseError: If the error body could not be parsed
    """
    try:
        content = response.read()
        rest_exception = RestException.from_json(content)
    except ValidationError as e:
        raise RestExceptionParseError(
            str(e),
            code=None,
            status=response.status_code,
            cause=e,
        ) from e
    finally:
        response.close()

    raise ApiError(
        rest_exception.message,
        code=rest_exception.code,
        more_info=rest_exception.more_info,
        status=rest_exception.status if rest_exception.status is not None else response.status_code,
    )


def check_response(response: Optional[Response], operation: str,
                   cause: Optional[BaseException] = None) -> Response:
    """
    Validate the outcome of a request.

    Args:
        response: Response from the transport, or None if it produced none
        operation: Description used in the connection error message, e.g. "Recording read"
        cause: Transport exception behind a missing response

    Returns:
        The response, when its status is 2xx

    Raises:
        ApiConnectionError: If response is None
        ApiError: If the status is not 2xx
    """
    if response is None:
        raise_connection_error(operation, cause)
    if not response.is_success:
        raise_for_status(response)
    return response
