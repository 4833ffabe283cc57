"""Configuration management using Pydantic Settings"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """9jaPay deployment targets"""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


BASE_URLS = {
    Environment.SANDBOX: "https://test.developer.9japay.com/v1/api",
    Environment.PRODUCTION: "https://developer.9japay.com/v1/api",
}


class Settings(BaseSettings):
    """SDK configuration loaded from NINEJAPAY_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="NINEJAPAY_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Credentials
    api_key: str = ""
    secret_key: str = ""

    # Target
    environment: Environment = Environment.SANDBOX
    base_url: str | None = None
    tls_verify: bool = True

    # HTTP Client
    http_timeout_seconds: float = 30.0

    # Service
    log_level: str = "INFO"


class ClientConfig(BaseModel):
    """Immutable client configuration.

    ``base_url`` overrides the environment's fixed URL verbatim. TLS
    verification is on unless ``tls_verify`` is explicitly False.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    secret_key: str
    environment: Environment
    base_url: str | None = None
    tls_verify: bool = True
    timeout_seconds: float = 30.0

    @property
    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url
        return BASE_URLS[self.environment]

    @property
    def is_sandbox(self) -> bool:
        return self.environment is Environment.SANDBOX

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        return cls(
            api_key=settings.api_key,
            secret_key=settings.secret_key,
            environment=settings.environment,
            base_url=settings.base_url,
            tls_verify=settings.tls_verify,
            timeout_seconds=settings.http_timeout_seconds,
        )
