"""
Main entry point for the FastAPI application.
Run this file to start the RPC server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn src.main:app --host 0.0.0.0 --port 3100 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from src.config.settings import get_config

if __name__ == "__main__":
    settings = get_config()
    debug = settings.DEBUG

    print(f"Starting marketplace RPC server in {settings.APP_ENV} mode...")
    print(f"RPC endpoint on http://{settings.HOST}:{settings.PORT}{settings.RPC_PATH}")

    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
