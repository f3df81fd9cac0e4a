"""Documentation summary endpoint."""

import logging

from fastapi import APIRouter, Depends

from apiguide.agents import SummaryAgent
from apiguide.exceptions import APIGuideError, UpstreamError
from apiguide.models import Credentials
from apiguide.server.dependencies import get_summary_agent
from apiguide.server.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Analyze"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze(
    body: AnalyzeRequest,
    agent: SummaryAgent = Depends(get_summary_agent),
) -> AnalyzeResponse:
    """Summarize documentation into a structured guide."""
    credentials = Credentials(llm_key=body.llm_key or None)
    try:
        summary = await agent.execute(
            body.content or "",
            user_intent=body.user_intent or None,
            api_name=body.api_name or None,
            llm_key=credentials.get_llm_key(),
        )
    except APIGuideError:
        raise
    except Exception as e:
        logger.exception("Analysis error")
        raise UpstreamError(agent.failure_message, str(e)) from e

    return AnalyzeResponse(analysis=summary.to_payload())
