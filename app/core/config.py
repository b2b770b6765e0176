from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "animals"
    MONGO_TIMEOUT_MS: int = 10000
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"     # project-root .env is picked up automatically

    @property
    def collections(self) -> list:
        """Collections the API owns, in backfill order"""
        return ["animals", "categories", "species"]

# import settings and use it directly
settings = Settings()
