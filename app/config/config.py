from typing import List, Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # PostgreSQL 관련 설정
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "recruit"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"

    # 설정 시 PostgreSQL 대신 사용 (예: sqlite:///./recruit.db)
    DATABASE_URL: Optional[str] = None

    # Redis 캐시 (미설정 시 캐시 비활성화)
    REDIS_URL: Optional[str] = None
    CACHE_TTL_SECONDS: int = 300

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

settings = Settings()
