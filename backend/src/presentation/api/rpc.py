"""
JSON-RPC API Router - single endpoint for all marketplace commands.

Flow:
  HTTP POST {"method": "template", "params": ["add", ...]}
      → Router → RpcRequest → RpcCommandDispatcher → Root command → Command
      → Service → Repository → Database

Exceptions are converted into JSON-RPC error objects here; the HTTP status
is always 200 for well-formed envelopes.
"""

from logging import getLogger
from typing import Any, Optional, Union

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from src.application.commands import RpcCommandDispatcher
from src.application.common.interfaces import RpcRequest
from src.config.settings import Config
from src.domain.exceptions import (
    CommandNotFoundError,
    DatabaseError,
    DomainValidationError,
    EntityNotFoundError,
    MessageError,
)

logger = getLogger(__name__)

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
NOT_FOUND = -32004
DATABASE_ERROR = -32005


# ==================== REQUEST/RESPONSE MODELS ====================


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request envelope."""

    jsonrpc: str = "2.0"
    method: str
    params: list[Any] = []
    id: Optional[Union[int, str]] = None


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


def _error_response(request_id: Optional[Union[int, str]], error: JsonRpcError) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": error.model_dump()}


def to_rpc_error(exc: Exception) -> JsonRpcError:
    """Map an exception raised by a command to a JSON-RPC error object."""
    if isinstance(exc, CommandNotFoundError):
        return JsonRpcError(code=METHOD_NOT_FOUND, message=str(exc))
    if isinstance(exc, DomainValidationError):
        return JsonRpcError(
            code=INVALID_PARAMS, message=exc.message, data=jsonable_encoder(exc.errors)
        )
    if isinstance(exc, MessageError):
        return JsonRpcError(code=INVALID_PARAMS, message=exc.message)
    if isinstance(exc, EntityNotFoundError):
        return JsonRpcError(code=NOT_FOUND, message=str(exc), data=jsonable_encoder(exc.key))
    if isinstance(exc, DatabaseError):
        return JsonRpcError(code=DATABASE_ERROR, message=exc.message)
    return JsonRpcError(code=INTERNAL_ERROR, message=f"Internal error: {exc}")


# ==================== ROUTER ====================

router = APIRouter(tags=["rpc"])


@router.post(Config.RPC_PATH)
@inject
async def rpc(
    request: JsonRpcRequest,
    dispatcher: FromDishka[RpcCommandDispatcher],
):
    """Execute one RPC command."""
    rpc_request = RpcRequest(method=request.method, params=request.params, id=request.id)
    try:
        result = await dispatcher.dispatch(rpc_request)
    except (
        CommandNotFoundError,
        DomainValidationError,
        MessageError,
        EntityNotFoundError,
        DatabaseError,
    ) as e:
        logger.warning(f"RPC {request.method} failed: {e}")
        return _error_response(request.id, to_rpc_error(e))
    except Exception as e:
        logger.exception(f"RPC {request.method} crashed: {e}")
        return _error_response(request.id, to_rpc_error(e))

    return {"jsonrpc": "2.0", "id": request.id, "result": jsonable_encoder(result)}
