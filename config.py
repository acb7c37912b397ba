"""Configuration management for the short link service."""

from typing import List, Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration."""

    # Redis settings
    redis_url: str = Field(
        default="redis://127.0.0.1:6379/0",
        description="Redis connection URL. A bare port means 127.0.0.1:<port>."
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    server_port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. 1 = single process (async handles many connections); >1 = multi-process."
    )

    server_hostname: Optional[str] = Field(
        default=None,
        description="Public base URL of the server; defaults to http://localhost:<server_port>"
    )

    cors_origins: List[str] = Field(
        default_factory=list,
        description="Allowed CORS origins; defaults to the server hostname"
    )

    # Credentials
    password: Optional[str] = Field(
        default=None,
        description="Require this password to add or delete redirects"
    )

    admin_password: Optional[str] = Field(
        default=None,
        description="Password for listing all redirects. Defaults to password if set."
    )

    # Redirect settings
    id_length: int = Field(
        default=10,
        ge=1,
        description="Length of generated short ids and edit keys"
    )

    member_format: Literal["json", "legacy"] = Field(
        default="json",
        description="Encoding of entries in the redirect set ('legacy' = wizard separated values)"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @model_validator(mode="after")
    def apply_defaults(self) -> "Config":
        """Fill settings that default to other settings."""
        if self.server_hostname is None:
            self.server_hostname = f"http://localhost:{self.server_port}"
        if self.admin_password is None:
            self.admin_password = self.password
        if not self.cors_origins:
            self.cors_origins = [self.server_hostname.rstrip("/")]
        return self

    @property
    def normalized_redis_url(self) -> str:
        """Redis URL with a scheme; a bare port is taken as a local server."""
        url = self.redis_url.strip()
        if url.isdigit():
            return f"redis://127.0.0.1:{url}"
        if "://" not in url:
            return f"redis://{url}"
        return url

    def public_dump(self) -> dict:
        """Configuration for logging, with secrets masked."""
        data = self.model_dump()
        for name in ("password", "admin_password"):
            if data[name] is not None:
                data[name] = "***"
        return data


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
