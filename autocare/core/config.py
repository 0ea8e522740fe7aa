from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CURRENCY_SYMBOL: str = "₹"
    CURRENCY_CODE: str = "INR"

    # JSON file with promo rules; the built-in table is used when unset.
    PROMO_RULES_PATH: str | None = None

    WALLET_MAX_TOP_UP: int = 1_000_000  # paise
    SPLIT_PAYMENT_ENABLED: bool = True


settings = Settings()
