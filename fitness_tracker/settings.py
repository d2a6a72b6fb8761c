from functools import lru_cache
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

class Settings(BaseSettings):
    # Storage
    DB_PATH: str = "fitness_tracker.db"

    # Logging (curses owns the terminal, so logs go to a file)
    LOG_FILE: str = "fitness_tracker.log"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No environment or .env overrides: paths are fixed for the app
        return (init_settings,)

    @property
    def DATABASE_URL(self) -> str:
        return f"sqlite:///{self.DB_PATH}"

@lru_cache
def get_settings() -> Settings:
    return Settings()
