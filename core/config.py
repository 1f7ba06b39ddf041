from decouple import config, Csv

class Settings:
    # Database Configuration
    DATABASE_URL: str = config("DATABASE_URL", default="sqlite:///./cascais_directory.db")

    # Security Configuration (tokens are issued by the external identity provider)
    SECRET_KEY: str = config("SECRET_KEY", default="your-secret-key-here-change-in-production")
    JWT_ALGORITHM: str = config("JWT_ALGORITHM", default="HS256")
    JWT_AUDIENCE: str = config("JWT_AUDIENCE", default="authenticated")

    # Storage Configuration
    MEDIA_ROOT: str = config("MEDIA_ROOT", default="./uploads")
    MEDIA_BASE_URL: str = config("MEDIA_BASE_URL", default="http://localhost:8000/uploads")
    MAX_UPLOAD_SIZE_MB: int = config("MAX_UPLOAD_SIZE_MB", default=10, cast=int)

    # Locale Configuration
    TIME_ZONE: str = config("TIME_ZONE", default="Europe/Lisbon")
    DEFAULT_LOCALE: str = config("DEFAULT_LOCALE", default="en")

    # URL Configuration
    CORS_ORIGINS: list = config(
        "CORS_ORIGINS",
        default="http://localhost:5173,http://localhost:3000",
        cast=Csv()
    )

    # Environment
    ENVIRONMENT: str = config("ENVIRONMENT", default="development")
    DEBUG: bool = config("DEBUG", default=True, cast=bool)

    # Logging
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

settings = Settings()
