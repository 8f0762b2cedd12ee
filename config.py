from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    shop_url: str = Field(..., description="myshop.myshopify.com")
    shop_token: str = Field(..., description="Admin API access token")
    shopify_api_version: str = "2025-10"
    request_timeout: float = 30.0

    jwt_secret_key: str = "your-super-secret-key-that-is-long-and-secure"
    admin_username: str = "admin"
    admin_password_hash: str = ""

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
