"""Documentation Q&A endpoint."""

import logging

from fastapi import APIRouter, Depends

from apiguide.agents import ChatAgent
from apiguide.exceptions import APIGuideError, UpstreamError
from apiguide.models import Credentials
from apiguide.server.dependencies import get_chat_agent
from apiguide.server.schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def chat(
    body: ChatRequest,
    agent: ChatAgent = Depends(get_chat_agent),
) -> ChatResponse:
    """Answer a question about the documentation."""
    credentials = Credentials(llm_key=body.llm_key or None)
    try:
        answer = await agent.execute(
            body.message or "",
            body.content or "",
            history=body.history or [],
            api_name=body.api_name or None,
            llm_key=credentials.get_llm_key(),
        )
    except APIGuideError:
        raise
    except Exception as e:
        logger.exception("Chat error")
        raise UpstreamError(agent.failure_message, str(e)) from e

    return ChatResponse(response=answer)
