"""Configuration settings for the stockroom"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    PROJECT_NAME: str = "Stockroom"
    VERSION: str = "1.0.0"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True  # Console rendering when disabled

    # Simulation Settings
    DEFAULT_DAYS: int = 2

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
