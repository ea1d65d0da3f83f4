from .errors import (
    ApiError,
    ChargebeeError,
    ConfigurationMissingError,
    ErrorKind,
    InvalidRequestError,
    MalformedResponseError,
    MethodNotImplementedError,
    NetworkError,
    OperationFailedError,
    PaymentError,
)
from .resource import Resource
from .results import EntityResult, ListEntry, ListResult

__all__ = [
    "ApiError",
    "ChargebeeError",
    "ConfigurationMissingError",
    "ErrorKind",
    "InvalidRequestError",
    "MalformedResponseError",
    "MethodNotImplementedError",
    "NetworkError",
    "OperationFailedError",
    "PaymentError",
    "Resource",
    "EntityResult",
    "ListEntry",
    "ListResult",
]
