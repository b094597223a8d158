"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False


class CorsSettings(BaseModel):
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])


class WalletSettings(BaseModel):
    default_name: str = "Unnamed"
    address_prefix: str = "WALLET_"
    address_length: int = Field(default=16, ge=8, le=32)
    amount_decimals: int = Field(default=8, ge=0, le=18)
    max_amount_digits: int = Field(default=18, ge=1, le=30)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Wallet Registry"
    log_level: str = "INFO"

    # Plain PORT variable as set by most hosting platforms; wins over SERVER__PORT.
    port_override: Optional[int] = Field(default=None, validation_alias="PORT")

    server: ServerSettings = ServerSettings()
    cors: CorsSettings = CorsSettings()
    wallet: WalletSettings = WalletSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        if self.port_override is not None:
            return self.port_override
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
