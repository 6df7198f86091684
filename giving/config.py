from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from fastapi import Request


class Settings(BaseSettings):
    # Stripe
    stripe_secret_key: str | None = Field(alias="STRIPE_SECRET_KEY", default=None)
    stripe_api_version: str = Field(alias="STRIPE_API_VERSION", default="2024-06-20")
    stripe_api_base: str = Field(alias="STRIPE_API_BASE", default="https://api.stripe.com")

    # Checkout redirects (static, not derived from the request)
    success_url: str = Field(alias="CHECKOUT_SUCCESS_URL", default="https://example.com/thanks?status=success")
    cancel_url: str = Field(alias="CHECKOUT_CANCEL_URL", default="https://example.com/thanks?status=cancel")

    # Giving
    default_currency: str = Field(alias="DEFAULT_CURRENCY", default="gbp")
    strict_donation_types: bool = Field(alias="STRICT_DONATION_TYPES", default=False)  # отклонять неизвестные типы

    # Server
    cors_origins: str = Field(alias="CORS_ORIGINS", default="*")
    host: str = Field(alias="HOST", default="0.0.0.0")
    port: int = Field(alias="PORT", default=3000)

    # Абсолютный путь к .env относительно корня проекта
    _env_path = (Path(__file__).resolve().parents[1] / ".env").as_posix()
    model_config = SettingsConfigDict(env_file=_env_path, env_file_encoding="utf-8", extra="ignore")

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()  # type: ignore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
