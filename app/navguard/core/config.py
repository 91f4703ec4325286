from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    APP_NAME: str = "NAVGUARD"
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    LOG_LEVEL: str = "INFO"
    NAVIGATION_ROOT_ID: str = "sidebar"
    NAVIGATION_FALLBACK_ID: str = "dashboard"
    NAVIGATION_DEFAULT_FAMILY: str = "seller"
    NAVIGATION_CONFIG_PATH: str = ""
    ALLOW_ANONYMOUS_NAVIGATION: bool = True
    METRICS_ENABLED: bool = True


settings = Settings()
