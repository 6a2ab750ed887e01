"""Configuration settings for the RabbitMQ HTTP API client.

Settings are loaded from environment variables and ``.env`` files and are
only consulted by :meth:`rabbitmq_http_api.Client.from_settings`; a client
built directly from arguments ignores them.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.http.transport import create_timeout


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    :param endpoint: Management API URL, may embed ``user:password@``
    :type endpoint: str
    :param username: Username used when the endpoint URL carries none
    :type username: Optional[str]
    :param password: Password used when the endpoint URL carries none
    :type password: Optional[str]
    :param timeout: Request timeout in seconds
    :type timeout: float
    :param verify_tls: Verify server certificates for https endpoints
    :type verify_tls: bool
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
        populate_by_name=True,
    )

    endpoint: str = Field(
        "http://127.0.0.1:15672",
        alias="RABBITMQ_HTTP_ENDPOINT",
        description="Management API endpoint URL",
    )
    username: Optional[str] = Field(
        None,
        alias="RABBITMQ_HTTP_USERNAME",
        description="Management API user",
    )
    password: Optional[str] = Field(
        None,
        alias="RABBITMQ_HTTP_PASSWORD",
        description="Management API password",
    )
    timeout: float = Field(
        30.0,
        alias="RABBITMQ_HTTP_TIMEOUT",
        description="Request timeout in seconds",
    )
    verify_tls: bool = Field(
        True,
        alias="RABBITMQ_HTTP_VERIFY_TLS",
        description="Verify TLS certificates",
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts.

        :param v: Timeout in seconds
        :type v: float
        :return: The validated timeout
        :rtype: float
        :raises ValueError: If the timeout is zero or negative
        """
        if v <= 0:
            raise ValueError("timeout must be greater than zero")
        return v

    def client_options(self) -> dict:
        """Keyword arguments for :class:`rabbitmq_http_api.Client`.

        :return: Options derived from these settings
        :rtype: dict
        """
        return {
            "username": self.username,
            "password": self.password,
            "timeout": create_timeout(self.timeout),
            "verify": self.verify_tls,
        }
