"""Typed view of the ``config:`` block of ``config.yaml``.

Every section has defaults, so a missing file or a partial block still
produces a usable configuration.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import URL, make_url

Environment = Literal["development", "production", "test"]


class CORSConfig(BaseModel):
    """Cross-origin settings passed straight to ``CORSMiddleware``."""

    origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:4200"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default_factory=lambda: ["*"])


class ErrorsConfig(BaseModel):
    not_found_as_server_error: bool = Field(
        default=False,
        description="Report missing products as a generic 500 instead of 404",
    )


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Minimum level for every sink")
    format: Literal["json", "plain"] = Field(
        default="json", description="File sink format"
    )
    file: str | None = Field(
        default="logs/catalog.log", description="File sink path; empty disables it"
    )
    max_size_mb: int = Field(default=10, description="Rotate the file at this size")
    backup_count: int = Field(default=5, description="Rotated files to keep")


class DatabaseConfig(BaseModel):
    """Where the product table lives and how connections are pooled.

    Outside production the password, if any, is part of ``url``. In
    production it comes from ``password_file`` (a mounted secret) or from the
    environment variable named by ``password_env_var``.
    """

    url: str = Field(
        default="sqlite:///./catalog.db", description="SQLAlchemy database URL"
    )
    user: str | None = Field(default=None, description="Overrides the URL's user")
    app_db: str | None = Field(
        default=None, description="Overrides the URL's database name"
    )
    environment_mode: Environment = "development"
    pool_size: int = Field(default=20, description="Persistent pooled connections")
    max_overflow: int = Field(default=10, description="Connections allowed above pool_size")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a connection")
    pool_recycle: int = Field(default=1800, description="Seconds before a connection is replaced")
    password_env_var: str | None = Field(
        default=None, description="Variable holding the production password"
    )
    password_file: str | None = Field(
        default=None, description="Secret file holding the production password"
    )

    @property
    def parsed_url(self) -> URL:
        return make_url(self.url)

    @property
    def is_sqlite(self) -> bool:
        return self.parsed_url.get_backend_name() == "sqlite"

    @computed_field
    @property
    def password(self) -> str | None:
        """The password to connect with, resolved for the current mode.

        Raises:
            ValueError: In production, when no configured source yields one
        """
        if self.environment_mode != "production":
            return self.parsed_url.password
        if self.is_sqlite:
            return None

        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError(
                    f"Cannot read database password file {self.password_file}"
                ) from e
        if self.password_env_var:
            secret = os.getenv(self.password_env_var)
            if not secret:
                raise ValueError(f"Environment variable {self.password_env_var} not set")
            return secret
        raise ValueError(
            "Production databases need password_file or password_env_var"
        )

    @computed_field
    @property
    def connection_string(self) -> str:
        """``url`` with the user, database and password overrides applied."""
        url = self.parsed_url
        if self.is_sqlite:
            return str(url)

        if url.password and self.environment_mode == "production":
            logger.warning("Database URL embeds a password in production")

        overrides = {}
        if self.user and self.user != url.username:
            overrides["username"] = self.user
        if self.app_db and self.app_db != url.database:
            overrides["database"] = self.app_db
        if overrides:
            logger.info("Overriding database URL parts: {}", sorted(overrides))

        password = self.password
        if password:
            overrides["password"] = password
        return url.set(**overrides).render_as_string(hide_password=False)


class AppConfig(BaseModel):
    name: str = Field(default="product-catalog", description="Service name")
    environment: Environment = "development"
    host: str = "localhost"
    port: int = 8000
    cors: CORSConfig = Field(default_factory=CORSConfig)
    errors: ErrorsConfig = Field(default_factory=ErrorsConfig)


class ConfigData(BaseModel):
    """Root of the configuration, mirroring the ``config:`` block."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    app: AppConfig = Field(default_factory=AppConfig)
