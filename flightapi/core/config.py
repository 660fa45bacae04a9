from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "development"
    LOG_LEVEL: str = "info"

    # Database settings
    DATABASE_URL: str = "sqlite:///./flights.db"

    # Discount service settings
    DISCOUNT_SERVICE_URL: str = "http://localhost:8081/discountapi/discounts/"
    DISCOUNT_SERVICE_TIMEOUT: float = 5.0

    # What to do when a discount takes the price below zero
    NEGATIVE_PRICE_POLICY: Literal["reject", "clamp"] = "reject"

settings = Settings()
