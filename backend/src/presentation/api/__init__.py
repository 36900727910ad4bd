"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.rpc import router as rpc_router

__all__ = [
    "rpc_router",
]
