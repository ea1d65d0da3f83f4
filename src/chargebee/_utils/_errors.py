import json
from typing import Union

from ..models.errors import (
    ApiError,
    InvalidRequestError,
    MalformedResponseError,
    OperationFailedError,
    PaymentError,
)

_ERRORS_BY_TYPE: dict[str, type[ApiError]] = {
    "payment": PaymentError,
    "operation_failed": OperationFailedError,
    "invalid_request": InvalidRequestError,
}


def classify_error(
    status_code: int, body: str
) -> Union[ApiError, MalformedResponseError]:
    """Turn an error response into the matching error value.

    The function does not raise; callers decide what to do with the result.
    Identical inputs always produce an error of the same class with the same
    fields.

    Args:
        status_code (int): HTTP status of the response.
        body (str): Raw response body.

    Returns:
        MalformedResponseError: If the body is not a JSON object.
        PaymentError | OperationFailedError | InvalidRequestError: Selected by
            the ``type`` field of the payload.
        ApiError: For any other or a missing ``type``.
    """
    try:
        error_json = json.loads(body)
    except ValueError:
        return MalformedResponseError(status_code, body)

    if not isinstance(error_json, dict):
        return MalformedResponseError(status_code, body)

    error_type = error_json.get("type")
    error_class = (
        _ERRORS_BY_TYPE.get(error_type, ApiError)
        if isinstance(error_type, str)
        else ApiError
    )
    return error_class(status_code, error_json)
