import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool

from app.core.context_store import ContextStore
from app.core.dependencies import get_chat_responder, get_context_store
from app.core.rate_limit import rate_limit
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.chat_service import ChatResponder, answer_chat

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
@rate_limit()
async def chat(
    request: Request,
    payload: ChatRequest,
    store: ContextStore = Depends(get_context_store),
    responder: ChatResponder = Depends(get_chat_responder),
):
    _ = request
    message = (payload.message or "").strip()
    if not message:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="message is required")

    try:
        reply = await run_in_threadpool(
            answer_chat,
            store,
            responder,
            message=message,
            context_id=payload.context_id,
        )
    except Exception as exc:
        logger.exception("chat_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Chat failed",
        ) from exc
    return ChatResponse(reply=reply)
