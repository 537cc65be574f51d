from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Room Booking API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Database
    DATABASE_URL: str = "sqlite:///./room_booking.db"

    # Security
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = []

    # Logging
    LOG_LEVEL: str = "INFO"

    # Application Settings
    MIN_BOOKING_LEAD_DAYS: int = 1

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
