from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from unicalc.core.converters.currency import RATES_TO_USD


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UNICALC_")

    app_name: str = "UniCalc"
    debug: bool = True
    host: str = "127.0.0.1"
    port: int = 8000  # 0 = pick a free port
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"
    log_file: str | None = None
    max_sessions: int = 1000
    currency_locale: str = "en_US"
    currency_rates: dict[str, float] = Field(default_factory=lambda: dict(RATES_TO_USD))


settings = Settings()
