"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_base_url: str = "http://localhost:3333"
    http_timeout_seconds: float = 10
    currency_symbol: str = "R$"
    order_success_message: str = "Cadastro realizado com sucesso"
    dashboard_route: str = "DashboardStack"
    favorite_rollback_on_failure: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
