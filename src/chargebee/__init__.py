"""Core HTTP pipeline of the ChargeBee API client."""

from os import environ as env
from typing import Any

from ._config import ApiConfig, ConfigurationManager
from ._services import EntityRequest, ListRequest
from ._utils import HttpMethod, Params, RequestSpec, build_url, setup_logging
from ._utils.constants import ENV_DEBUG
from ._version import __version__
from .models import (
    ApiError,
    ChargebeeError,
    ConfigurationMissingError,
    EntityResult,
    ErrorKind,
    InvalidRequestError,
    ListEntry,
    ListResult,
    MalformedResponseError,
    MethodNotImplementedError,
    NetworkError,
    OperationFailedError,
    PaymentError,
    Resource,
)


def configure(
    site: str, api_key: str, *, debug: bool = False, **kwargs: Any
) -> ApiConfig:
    """Publish the process-wide configuration used by ``request()`` calls.

    Args:
        site (str): The ChargeBee site name, e.g. ``"acme-test"``.
        api_key (str): The API key.
        debug (bool): Enable debug logging. Also enabled by ``CHARGEBEE_DEBUG``.
        **kwargs: Other ``ApiConfig`` fields (charset, timeouts, base_url, ...).

    Returns:
        ApiConfig: The published configuration.
    """
    setup_logging(debug or env.get(ENV_DEBUG, "").lower() in ("1", "true"))
    return ApiConfig.configure(site, api_key, **kwargs)


__all__ = [
    "__version__",
    "configure",
    "ApiConfig",
    "ConfigurationManager",
    "EntityRequest",
    "ListRequest",
    "HttpMethod",
    "Params",
    "RequestSpec",
    "build_url",
    "ApiError",
    "ChargebeeError",
    "ConfigurationMissingError",
    "EntityResult",
    "ErrorKind",
    "InvalidRequestError",
    "ListEntry",
    "ListResult",
    "MalformedResponseError",
    "MethodNotImplementedError",
    "NetworkError",
    "OperationFailedError",
    "PaymentError",
    "Resource",
]
