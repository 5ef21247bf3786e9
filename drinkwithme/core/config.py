from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # JWT
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Database
    DATABASE_URL: str
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Matching
    MAX_SELECTED_VENUES: int = 3

    class Config:
        env_file = ".env"


settings = Settings()
