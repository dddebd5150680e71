from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./salon_agenda.db"

    # Comma-separated, e.g. "http://localhost:8081,https://agenda.example.com"
    cors_origins: str = ""

    free_slot_interval_minutes: int = 15
    default_duration_code: str = "1h"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
