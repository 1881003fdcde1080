import base64
import binascii
import json
import logging
from typing import Optional
from fastapi import Header
from pydantic import ValidationError

from edusharing_backend.api.exceptions import BadRequestException, UnauthorizedException
from edusharing_backend.interface.context import RequestContext

logger = logging.getLogger(__name__)

CONTEXT_HEADER = "X-Edusharing-Context"

def encode_request_context(context: RequestContext) -> str:
    return str(base64.b64encode(bytes(context.model_dump_json(), encoding="utf-8")), "utf-8")

def decode_request_context(value: str) -> RequestContext:
    try:
        payload = json.loads(base64.b64decode(value, validate=True))
        return RequestContext.model_validate(payload)
    except (binascii.Error, ValueError, ValidationError) as e:
        logger.warning(f"Invalid {CONTEXT_HEADER} header: {e}")
        raise BadRequestException(detail=f"Invalid {CONTEXT_HEADER} header")

async def get_request_context(x_edusharing_context: Optional[str] = Header(None)) -> RequestContext:
    """Session, user and course state forwarded by the host application."""
    if not x_edusharing_context:
        raise UnauthorizedException(detail=f"Missing {CONTEXT_HEADER} header")
    return decode_request_context(x_edusharing_context)
