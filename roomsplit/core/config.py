from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./roomsplit.db"
    DB_CONNECT_RETRIES: int = 5
    DB_RETRY_DELAY: float = 2.0
    LOG_LEVEL: str = "INFO"
    ROOM_CODE_LENGTH: int = 6

    class Config:
        env_file = ".env"

settings = Settings()
