from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://169.254.169.254/"


class ClientConfig(BaseSettings):
    """Settings for building a `Client`.

    Read from INSTANCE_METADATA_* environment variables when instantiated.
    """

    model_config = SettingsConfigDict(env_prefix="INSTANCE_METADATA_")

    base_url: str = Field(DEFAULT_BASE_URL)
    # None keeps httpx's default timeout
    timeout: Optional[float] = Field(None, ge=0)
    debug: bool = Field(False)
