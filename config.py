from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    HOST: str = "localhost"
    PORT: int = 9000
    FRONTEND_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Length of generated book ids
    BOOK_ID_LENGTH: int = 16

    @property
    def allow_origins(self) -> List[str]:
        return [origin.strip() for origin in self.FRONTEND_ORIGINS.split(",") if origin.strip()]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
