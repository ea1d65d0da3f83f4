import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/chargebee) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from chargebee._config import ApiConfig, ConfigurationManager  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clean environment variables and the default configuration before each test."""
    for name in (
        "CHARGEBEE_SITE",
        "CHARGEBEE_API_KEY",
        "CHARGEBEE_BASE_URL",
        "CHARGEBEE_CHARSET",
        "CHARGEBEE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("chargebee._config.load_dotenv", lambda: False)
    ConfigurationManager().reset()
    yield
    ConfigurationManager().reset()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def site() -> str:
    return "acme-test"


@pytest.fixture
def api_key() -> str:
    return "test_cdT5rlwmcuFLuBkRUzV"


@pytest.fixture
def base_url(site: str) -> str:
    return f"https://{site}.chargebee.com/api/v2"


@pytest.fixture
def config(site: str, api_key: str) -> ApiConfig:
    return ApiConfig(site=site, api_key=api_key)
