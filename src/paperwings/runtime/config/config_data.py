"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field, field_validator
from sqlalchemy.engine import URL, make_url


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )

    @field_validator("file", mode="before")
    @classmethod
    def _empty_file_is_none(cls, value: str | None) -> str | None:
        return value or None


class RetryConfig(BaseModel):
    """Connection supervision settings used when (re)connecting."""

    max_attempts: int = Field(
        default=5, ge=1, description="Connection attempts before giving up"
    )
    retry_delay: float = Field(
        default=2.0, ge=0.0, description="Delay before the first retry in seconds"
    )
    backoff_factor: float = Field(
        default=2.0, ge=1.0, description="Multiplier applied to the delay per attempt"
    )
    max_delay: float = Field(
        default=30.0, ge=0.0, description="Upper bound for a single delay in seconds"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str | None = Field(
        default=None,
        description="Full database URL; overrides the individual connection fields",
    )
    driver: str = Field(default="mysql+pymysql", description="SQLAlchemy driver name")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=3306, description="Database port")
    user: str = Field(default="root", description="Database username")
    password: str | None = Field(default=None, description="Database password")
    name: str = Field(default="paperwings", description="Database (schema) name")
    pool_size: int = Field(default=5, ge=1, description="Connection pool size")
    max_overflow: int = Field(default=5, ge=0, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    session_timeout: int | None = Field(
        default=3600,
        description="wait_timeout/interactive_timeout applied to MySQL sessions",
    )
    retry: RetryConfig = Field(
        default_factory=RetryConfig, description="Connection retry policy"
    )

    @field_validator("url", "password", mode="before")
    @classmethod
    def _empty_is_none(cls, value: str | None) -> str | None:
        return value or None

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string.

        A configured ``url`` wins. Otherwise the URL is assembled from the
        individual fields so that passwords with special characters are
        escaped correctly.
        """
        if self.url:
            return make_url(self.url).render_as_string(hide_password=False)

        return URL.create(
            drivername=self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
        ).render_as_string(hide_password=False)

    @property
    def backend(self) -> str:
        """Name of the database backend, e.g. ``mysql`` or ``sqlite``."""
        return make_url(self.connection_string).get_backend_name()


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    name: str = Field(default="PaperWings API", description="Application title")
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=4000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
