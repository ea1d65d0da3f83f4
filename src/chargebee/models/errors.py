from enum import Enum
from typing import Any, Mapping, Optional


class ErrorKind(str, Enum):
    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"
    PAYMENT = "payment"
    OPERATION_FAILED = "operation_failed"
    INVALID_REQUEST = "invalid_request"
    API = "api"
    NOT_IMPLEMENTED = "not_implemented"
    CONFIGURATION_MISSING = "configuration_missing"


class ChargebeeError(Exception):
    """Base class for every failure raised by the client."""

    kind: ErrorKind


class ConfigurationMissingError(ChargebeeError):
    kind = ErrorKind.CONFIGURATION_MISSING

    def __init__(
        self,
        message="Configuration required. Call chargebee.configure(site, api_key) or set the CHARGEBEE_SITE and CHARGEBEE_API_KEY environment variables.",
    ):
        self.message = message
        super().__init__(self.message)


class NetworkError(ChargebeeError):
    """Raised when no HTTP response could be obtained at all.

    Connection refused, DNS failures, timeouts, redirect loops and undecodable
    bodies end up here. The underlying httpx exception is available as
    ``__cause__``.
    """

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(self.message)


class MalformedResponseError(ChargebeeError, ValueError):
    """Raised when an error response body is not a JSON object.

    This usually means the response did not come from the API at all
    (a proxy, a load balancer page, ...).
    """

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        self.message = f"Not in JSON format. Probably not a ChargeBee response. \n {body}"
        super().__init__(self.message)


class MethodNotImplementedError(ChargebeeError, NotImplementedError):
    kind = ErrorKind.NOT_IMPLEMENTED

    def __init__(self, method: str):
        self.method = method
        self.message = f"HTTP method {method} is not implemented"
        super().__init__(self.message)


class ApiError(ChargebeeError):
    """An error response returned by the API.

    Used as is for error types the client does not model explicitly, and as
    the base of the payment, operation-failed and invalid-request errors.

    Attributes:
        status_code (int): HTTP status of the response.
        type (Optional[str]): The ``type`` discriminator of the payload.
        api_error_code (Optional[str]): Machine readable error code.
        message (str): Human readable error message.
        param (Optional[str]): Name of the offending parameter, if any.
        error_code (Optional[str]): Legacy error code.
        json_obj (dict[str, Any]): The full decoded error payload.
    """

    kind = ErrorKind.API

    def __init__(self, status_code: int, json_obj: Mapping[str, Any]):
        self.status_code = status_code
        self.json_obj = dict(json_obj)
        self.type: Optional[str] = self.json_obj.get("type")
        self.api_error_code: Optional[str] = self.json_obj.get("api_error_code")
        self.param: Optional[str] = self.json_obj.get("param")
        self.error_code: Optional[str] = self.json_obj.get("error_code")
        self.message: str = (
            self.json_obj.get("message") or self.json_obj.get("error_msg") or ""
        )
        super().__init__(self.message)

    def get(self, field: str, default: Any = None) -> Any:
        """Return a field of the error payload that has no dedicated attribute."""
        return self.json_obj.get(field, default)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"api_error_code={self.api_error_code!r}, message={self.message!r})"
        )


class PaymentError(ApiError):
    kind = ErrorKind.PAYMENT


class OperationFailedError(ApiError):
    kind = ErrorKind.OPERATION_FAILED


class InvalidRequestError(ApiError):
    """The request was rejected by validation; ``param`` names the culprit."""

    kind = ErrorKind.INVALID_REQUEST
