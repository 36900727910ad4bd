"""ASGI entry point: ``uvicorn src.main:app``."""

from src.config.logging_config import setup_logging
from src.config.settings import Config

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

from src.fastapi_app import create_fastapi_app  # noqa: E402

app = create_fastapi_app()
