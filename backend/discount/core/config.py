from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Discount API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Relational store holding the coupon table
    DISCOUNT_DATABASE_DSN: str = Field(
        default="sqlite:////tmp/discount.db",
        validation_alias=AliasChoices("DISCOUNT_DATABASE_DSN", "PMS_DISCOUNT_CONNECTION_STRING"),
    )

    LOG_LEVEL: str = "INFO"

    # gRPC server
    RPC_HOST: str = "[::]"
    RPC_PORT: int = 5003
    RPC_MAX_WORKERS: int = 10

    # CORS
    CORS_ORIGINS: str = "*"

    @property
    def rpc_address(self) -> str:
        return f"{self.RPC_HOST}:{self.RPC_PORT}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
