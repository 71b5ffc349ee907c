from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    SALON_TIMEZONE: str = "America/Sao_Paulo"
    WHATSAPP_COUNTRY_CODE: str = "55"
    BOOKING_BASE_URL: str = "beautypro.app"

    STRICT_STATUS_TRANSITIONS: bool = False
    DETECT_SCHEDULING_CONFLICTS: bool = False
    SEED_DEMO_DATA: bool = True


settings = Settings()
