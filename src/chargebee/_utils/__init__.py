from ._errors import classify_error
from ._logs import setup_logging
from ._params import Params
from ._request_spec import HttpMethod, RequestSpec
from ._timestamps import convert_from_timestamp, convert_to_timestamp
from ._url import build_url

__all__ = [
    "classify_error",
    "setup_logging",
    "Params",
    "HttpMethod",
    "RequestSpec",
    "convert_from_timestamp",
    "convert_to_timestamp",
    "build_url",
]
