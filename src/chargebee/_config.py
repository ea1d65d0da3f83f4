import base64
import codecs
from logging import getLogger
from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from httpx import Timeout
from pydantic import (
    BaseModel,
    ConfigDict,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from ._utils.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_CHARSET,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_DOMAIN_SUFFIX,
    DEFAULT_PROTOCOL,
    DEFAULT_READ_TIMEOUT,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_CHARSET,
    ENV_SITE,
)
from .models.errors import ConfigurationMissingError

logger = getLogger("chargebee")

_HTTP_URL = TypeAdapter(HttpUrl)


class ApiConfig(BaseModel):
    """Immutable settings used to address and authenticate requests.

    One instance is published process-wide (see ``ApiConfig.configure`` and
    ``ApiConfig.instance``), but any request can be sent with an explicit,
    independent instance instead.
    """

    model_config = ConfigDict(frozen=True)

    site: Optional[str] = None
    api_key: str
    charset: str = DEFAULT_CHARSET
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    protocol: str = DEFAULT_PROTOCOL
    domain_suffix: str = DEFAULT_DOMAIN_SUFFIX
    api_version: str = DEFAULT_API_VERSION
    base_url: Optional[str] = None

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be empty")
        return value

    @field_validator("charset")
    @classmethod
    def validate_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown charset '{value}'") from e
        return value

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_base_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as e:
            raise ValueError(f"Invalid base_url '{value}'") from e
        return value.rstrip("/")

    @model_validator(mode="after")
    def check_site_or_base_url(self) -> "ApiConfig":
        if not self.site and not self.base_url:
            raise ValueError("Either site or base_url must be provided")
        return self

    @property
    def api_base_url(self) -> str:
        if self.base_url:
            return self.base_url
        return f"{self.protocol}://{self.site}.{self.domain_suffix}/api/{self.api_version}"

    @property
    def auth_value(self) -> str:
        token = base64.b64encode(f"{self.api_key}:".encode("utf-8")).decode("ascii")
        return f"Basic {token}"

    @property
    def timeout(self) -> Timeout:
        return Timeout(self.read_timeout, connect=self.connect_timeout)

    def __repr__(self) -> str:
        return (
            f"ApiConfig(api_base_url={self.api_base_url!r}, "
            f"charset={self.charset!r}, api_key='***')"
        )

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Build a configuration from the environment (and a ``.env`` file).

        Raises:
            ConfigurationMissingError: If neither a site nor a base URL, or no
                API key, is available.
        """
        load_dotenv()

        site = env.get(ENV_SITE)
        base_url = env.get(ENV_BASE_URL)
        api_key = env.get(ENV_API_KEY)
        if not (site or base_url) or not api_key:
            raise ConfigurationMissingError()

        kwargs: dict[str, Any] = {
            "site": site,
            "api_key": api_key,
            "base_url": base_url,
        }
        charset = env.get(ENV_CHARSET)
        if charset:
            kwargs["charset"] = charset
        return cls(**kwargs)

    @classmethod
    def configure(cls, site: str, api_key: str, **kwargs: Any) -> "ApiConfig":
        """Create a configuration and publish it as the process-wide default."""
        config = cls(site=site, api_key=api_key, **kwargs)
        ConfigurationManager().publish(config)
        return config

    @classmethod
    def instance(cls) -> "ApiConfig":
        """Return the process-wide default configuration."""
        return ConfigurationManager().default


class ConfigurationManager:
    """Singleton holder of the default configuration."""

    _instance = None
    _default: Optional[ApiConfig] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def default(self) -> ApiConfig:
        if self._default is None:
            self.publish(ApiConfig.from_env())
        return self._default  # type: ignore[return-value]

    def publish(self, config: ApiConfig) -> None:
        logger.debug(f"CONFIG: {config!r}")
        type(self)._default = config

    def reset(self) -> None:
        type(self)._default = None
