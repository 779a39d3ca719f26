"""HTTP surface of the chatbot proxy.

Routes:
  /api/chatbot  POST {"message": str} -> {"reply": str}; other methods -> 405
  /api/mapdata  GET -> {"terminals": [...]}

Configuration is loaded and the provider adapter selected once, at import.
Handlers are plain ``*_core`` functions so tests can call them directly; the
route wrappers only adapt them to FastAPI.
"""
import asyncio
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

import providers
from config_manager import get_config_summary, load_config, provider_config as _provider_config, terminals_config
from document_store import TerminalStore
from errors import ChatbotError, DocumentStoreError, InternalError, MethodNotAllowed
from logging_manager import request_context, setup_logging
from validation import validate_chat_request

app = FastAPI(title="Chatbot Proxy")

cfg = load_config()
setup_logging(cfg)
provider_config = _provider_config(cfg)
adapter = providers.get_adapter(provider_config.name)
_terminals = terminals_config(cfg)
terminal_store = TerminalStore(_terminals.collection, _terminals.service_account)

logger.info("Chatbot proxy configured", **get_config_summary(cfg))

# Every method is routed so the validator, not the router, answers 405.
CHAT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def chat_core(method: str, body: Optional[bytes]) -> Dict[str, Any]:
    """Validate one chat call, forward it, and return the reply payload.

    Raises ChatbotError subclasses; anything unexpected becomes InternalError.
    """
    try:
        chat_request = validate_chat_request(method, body)
        reply = providers.call_provider(chat_request.message, provider_config, adapter=adapter)
        return reply.to_response()
    except ChatbotError:
        raise
    except Exception:
        logger.exception("Chatbot API error")
        raise InternalError()


def list_terminals_core() -> Dict[str, Any]:
    try:
        return {"terminals": terminal_store.list_terminals()}
    except Exception:
        logger.exception("Error fetching terminals")
        raise DocumentStoreError()


@app.middleware('http')
async def _bind_request_id(request: Request, call_next):
    with request_context(request.headers.get('x-request-id')) as request_id:
        logger.debug("Request received", method=request.method, path=request.url.path)
        resp = await call_next(request)
        resp.headers['X-Request-ID'] = request_id
        logger.debug("Request completed", status=resp.status_code)
        return resp


@app.exception_handler(ChatbotError)
async def _chatbot_error(request: Request, exc: ChatbotError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Methods the router rejects itself share the validator's 405 body.
    content = MethodNotAllowed().to_dict() if exc.status_code == 405 else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content,
                        headers=getattr(exc, 'headers', None))


async def _chatbot(request: Request):
    body = await request.body()
    return await asyncio.to_thread(chat_core, request.method, body)


def _mapdata():
    return list_terminals_core()


app.api_route("/api/chatbot", methods=CHAT_METHODS)(_chatbot)
app.get("/api/mapdata")(_mapdata)
