from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str
    db_echo: bool = False

    # Tequila (Kiwi.com), location lookup + SkyPicker flight search
    tequila_api_key: str = ""
    tequila_base_url: str = "https://tequila-api.kiwi.com"
    http_timeout_seconds: float = 30.0

    # Search
    default_currency: str = "EUR"
    records_page_size: int = 50

    # App
    app_env: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"


# Istanza globale usata in tutto il progetto
settings = Settings()
