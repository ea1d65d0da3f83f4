from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from httpx import Timeout


class HttpMethod(str, Enum):
    """HTTP methods of the API surface.

    Only GET and POST are dispatched; DELETE and PUT are part of the
    enumeration but requests using them fail with MethodNotImplementedError.
    """

    DELETE = "DELETE"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"


@dataclass(frozen=True)
class RequestSpec:
    """A fully built HTTP request, ready to be sent once.

    For GET requests the ``url`` already carries the encoded query string,
    for POST requests the encoded form lives in ``content``.
    """

    method: HttpMethod
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None
    timeout: Optional[Timeout] = None
