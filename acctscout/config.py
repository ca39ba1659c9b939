# acctscout/config.py
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "acctscout"

    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------
    # Batch worker
    # ---------------------------------------------------------
    CHUNK_SIZE: int = 1000
    WORKER_CONCURRENCY: int = 50
    PROGRESS_STEP: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
