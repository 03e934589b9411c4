import os


class Settings:
    # API Settings
    PROJECT_NAME: str = "memstats"
    VERSION: str = "0.1.0"
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", 8010))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Stats receiver settings
    STATS_ENABLE_RECEIVER: bool = os.getenv("STATS_ENABLE_RECEIVER", "true").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "")


settings = Settings()
