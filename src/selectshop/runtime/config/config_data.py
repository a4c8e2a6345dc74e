"""Pydantic models mirroring the ``config:`` section of config.yaml."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    origins: list[str] = Field(default=["http://localhost:3000", "http://localhost:8080"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "PUT", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])
    # Login hands the token back in this header
    expose_headers: list[str] = Field(default=["Authorization"])


class JWTConfig(BaseModel):
    """Issuing and checking of access tokens."""

    allowed_algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    gen_issuer: str = "selectshop"
    audiences: list[str] = Field(default_factory=lambda: ["selectshop-api"])
    clock_skew: int = Field(default=60, ge=0, description="Leeway in seconds")
    access_token_ttl_seconds: int = Field(default=3600, gt=0)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "plain"] = Field(
        default="json", description="Format of the file sink; the console is always plain"
    )
    file: str | None = None
    max_size_mb: int = Field(default=10, description="Rotate the file sink at this size")
    backup_count: int = Field(default=5, description="Rotated files to keep")


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./selectshop.db"
    # Pool settings apply to server databases only
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800
    echo: bool = False

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class AppConfig(BaseModel):
    environment: Literal["development", "production", "test"] = "development"
    host: str = "localhost"
    port: int = 8000
    session_signing_secret: str | None = Field(
        default="dev-secret-key", description="HS256 key for access tokens"
    )
    cors: CORSConfig = Field(default_factory=CORSConfig)


class SecurityConfig(BaseModel):
    admin_token: str = Field(
        default="dev-admin-token",
        description="Must accompany a signup that asks for the ADMIN role",
    )
    password_hash_iterations: int = Field(default=260000, gt=0)


class ProductConfig(BaseModel):
    min_my_price: int = Field(default=100, description="Lowest target price a user may set")


class ConfigData(BaseModel):
    """Root of the configuration tree."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    jwt: JWTConfig = Field(default_factory=JWTConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    product: ProductConfig = Field(default_factory=ProductConfig)
