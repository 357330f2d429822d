from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ID generation — snowflake machine bits (0-1023) for payment/favorite IDs
    ID_MACHINE_ID: int = 0

    # Logging
    LOG_LEVEL: str = "INFO"

    # App
    APP_NAME: str = "Wallet Ledger"
    DEBUG: bool = False


settings = Settings()
