"""AppSettings -- organization user API configuration.

All environment variables are read via pydantic-settings.
JWT_SECRET is required and will cause a startup failure if missing.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Organization user API settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Authentication - Required, application fails to start if missing
    JWT_SECRET: str

    # Tenant routing
    TENANT_QUALIFIED_URLS_ENABLED: bool = True
    SUPER_TENANT_DOMAIN: str = "carbon.super"

    # Prepended to every relative public URL (e.g. when behind a reverse proxy)
    PROXY_CONTEXT_PATH: str = ""

    # Organization management service
    ORG_MGT_SERVICE_URL: str = "http://org-mgt.internal/api/server/v1"
    EXTERNAL_API_TIMEOUT_SECONDS: int = 30

    LOG_LEVEL: str = "INFO"


settings = AppSettings()
