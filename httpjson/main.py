import json
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from .config import settings
from .errors import CharsetError
from .messages import CharsetJSONResponse, unmarshal_request
from .models import HealthResponse, Message

logger = logging.getLogger(__name__)
logging.getLogger("httpjson").setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title="httpjson",
    description="JSON over HTTP in any MIME charset",
    version="0.1.0",
    default_response_class=CharsetJSONResponse,
)


@app.on_event("startup")
async def on_startup():
    logger.info(f"Serving JSON responses as {settings.RESPONSE_CONTENT_TYPE}")


@app.exception_handler(CharsetError)
async def charset_error(request: Request, exc: CharsetError):
    return PlainTextResponse(str(exc), status_code=415)


@app.exception_handler(UnicodeError)
@app.exception_handler(json.JSONDecodeError)
@app.exception_handler(ValidationError)
async def bad_body(request: Request, exc: ValueError):
    return PlainTextResponse(str(exc), status_code=400)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/echo")
async def echo(request: Request):
    value = await unmarshal_request(request)
    return CharsetJSONResponse(value, media_type=request.headers.get("content-type") or None)


@app.get("/message")
def get_message(s: str = "", charset: Optional[str] = None):
    media_type = settings.RESPONSE_CONTENT_TYPE
    if charset:
        media_type = f"application/json;charset={charset}"
    return CharsetJSONResponse(Message(s=s), media_type=media_type)


@app.post("/message")
async def post_message(request: Request):
    message = await unmarshal_request(request, Message)
    return CharsetJSONResponse(message, media_type=request.headers.get("content-type") or None)
