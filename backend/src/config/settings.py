"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = _flag("DEBUG", "false")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3100"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # RPC
    RPC_PATH = os.getenv("RPC_PATH", "/api/rpc")

    # Prisma Database settings (read by prisma/schema.prisma)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "file:./marketplace.db")

    # Default data, seeded on startup when SEED_DEFAULT_DATA is on
    SEED_DEFAULT_DATA = _flag("SEED_DEFAULT_DATA", "true")
    DEFAULT_PROFILE_NAME = os.getenv("DEFAULT_PROFILE_NAME", "DEFAULT")
    DEFAULT_PROFILE_ADDRESS = os.getenv("DEFAULT_PROFILE_ADDRESS", "")
    DEFAULT_MARKET_NAME = os.getenv("DEFAULT_MARKET_NAME", "DEFAULT")
    DEFAULT_MARKET_PRIVATE_KEY = os.getenv(
        "DEFAULT_MARKET_PRIVATE_KEY", "2Zc2pc9jSx2qF5tpu25DCZEr1Dwj8JBoVL5WP4H1drJsX9sP4ek"
    )
    DEFAULT_MARKET_ADDRESS = os.getenv(
        "DEFAULT_MARKET_ADDRESS", "pmktyVZshdMAQ6DPbbRXEFNGuzMbTMkqAA"
    )


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    SEED_DEFAULT_DATA = False


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment; unknown names fall back to development."""
    if env is None:
        env = Config.APP_ENV
    return config.get(env, config["default"])
