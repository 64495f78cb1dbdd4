from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_USER: str = "uwrite"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "uwrite"

    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set
    DATABASE_URL: str | None = None

    SESSION_TTL_DAYS: int = 30
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"

settings = Settings()
