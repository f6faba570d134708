"""Environment-driven settings of the gateway client.

Every field can be set through an ``IPAY88_``-prefixed environment variable
(e.g. ``IPAY88_SHARED_SECRET``) or a local ``.env`` file.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Typed view of the gateway client configuration."""

    seller_identifier: str | None = None
    shared_secret: SecretStr | None = None
    request_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    model_config = SettingsConfigDict(env_prefix="IPAY88_", env_file=".env", extra="ignore")

    def shared_secret_value(self) -> str | None:
        return self.shared_secret.get_secret_value() if self.shared_secret else None
