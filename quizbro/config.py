"""
Configuration management using Pydantic Settings
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Database
    DATABASE_URL: str = "sqlite:///./quizbro.db"
    
    # Application
    APP_NAME: str = "Quiz Bro"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:8000"]
    
    # Auth
    SESSION_TOKEN_BYTES: int = 32
    SESSION_TTL_MINUTES: int = 1440  # 24 hours
    MIN_PASSWORD_LENGTH: int = 6
    DEFAULT_ROLE: str = "student"
    
    # Dashboards
    RECENT_RESULTS_LIMIT: int = 5
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
