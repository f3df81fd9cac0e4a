"""Documentation acquisition endpoint."""

import logging

from fastapi import APIRouter, Depends

from apiguide.agents import DocumentationAgent
from apiguide.exceptions import APIGuideError, UpstreamError
from apiguide.models import AcquisitionRequest, Credentials
from apiguide.server.dependencies import get_documentation_agent
from apiguide.server.schemas import CrawlRequest, CrawlResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Crawl"])


@router.post(
    "/crawl",
    response_model=CrawlResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def crawl(
    body: CrawlRequest,
    agent: DocumentationAgent = Depends(get_documentation_agent),
) -> CrawlResponse:
    """Fetch documentation from a URL, or accept pasted text."""
    try:
        result = await agent.execute(
            AcquisitionRequest(url=body.url, text=body.text),
            Credentials(extractor_key=body.extractor_key or None),
        )
    except APIGuideError:
        raise
    except Exception as e:
        logger.exception("Crawl error")
        raise UpstreamError("Failed to process request", str(e)) from e

    return CrawlResponse(**result.to_payload())
