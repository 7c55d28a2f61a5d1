from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_TITLE: str = "Tournament Bracket API"
    DATABASE_URL: str = "sqlite:///./tournaments.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
