from typing import TYPE_CHECKING, Optional
from urllib.parse import quote

if TYPE_CHECKING:
    from .._config import ApiConfig


def build_url(*paths: str, config: Optional["ApiConfig"] = None) -> str:
    """Join path segments onto the configured API base URL.

    Every segment is percent-encoded on its own, so identifiers containing
    ``/`` or spaces stay a single segment.

    Examples:
        ```python
        build_url("customers", "cust 1")
        # https://acme.chargebee.com/api/v2/customers/cust%201
        ```
    """
    if config is None:
        from .._config import ApiConfig

        config = ApiConfig.instance()

    url = config.api_base_url.rstrip("/")
    for path in paths:
        url += "/" + quote(str(path), safe="")
    return url
