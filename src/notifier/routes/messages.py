"""
Message Routes

Endpoints for sending SMS and chat messages and listing configured transports.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..exceptions import (
    InvalidArgumentError,
    NoSupportingTransportError,
    TransportError,
    UnsupportedMessageTypeError,
)
from ..models.message import Message
from ..models.options import TelegramOptions
from ..services.notifier_service import get_notifier_service

logger = logging.getLogger("notifier.routes.messages")
router = APIRouter(tags=["messages"])


# ============================================
# Request/Response Models
# ============================================

class SendSmsRequest(BaseModel):
    """Send an SMS"""
    phone: str
    subject: str
    transport: Optional[str] = None      # transport name, None = first that supports SMS


class SendChatRequest(BaseModel):
    """Send a chat message"""
    subject: str
    chat_id: Optional[str] = None        # overrides the transport's default channel
    parse_mode: Optional[str] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    transport: Optional[str] = None


class SentMessageResponse(BaseModel):
    """Send result"""
    transport: str
    message_id: Optional[str]


class TransportResponse(BaseModel):
    """Configured transport"""
    name: str
    dsn: str


# ============================================
# Helpers
# ============================================

def _send(message: Message) -> SentMessageResponse:
    service = get_notifier_service()
    try:
        sent = service.send(message)
    except (InvalidArgumentError, NoSupportingTransportError, UnsupportedMessageTypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TransportError as e:
        logger.warning(f"Provider call failed: {e}")
        raise HTTPException(
            status_code=502,
            detail={
                "error": str(e),
                "status_code": e.status_code,
                "description": e.description,
            },
        )
    return SentMessageResponse(**sent.to_dict())


# ============================================
# Routes
# ============================================

@router.get("/transports", response_model=List[TransportResponse])
def list_transports():
    """List configured transports in dispatch order"""
    transports = get_notifier_service().dispatcher.transports
    return [TransportResponse(name=name, dsn=str(t)) for name, t in transports.items()]


@router.post("/messages/sms", response_model=SentMessageResponse)
def send_sms(request: SendSmsRequest):
    """Send an SMS through the first transport that supports it (or the named one)"""
    try:
        message = Message.sms(request.phone, request.subject)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _send(message.with_transport(request.transport))


@router.post("/messages/chat", response_model=SentMessageResponse)
def send_chat(request: SendChatRequest):
    """Send a chat message through the first transport that supports it (or the named one)"""
    options = TelegramOptions(
        chat_id=request.chat_id,
        parse_mode=request.parse_mode,
        disable_web_page_preview=request.disable_web_page_preview,
        disable_notification=request.disable_notification,
    )
    message = Message.chat(request.subject, options).with_transport(request.transport)
    return _send(message)
