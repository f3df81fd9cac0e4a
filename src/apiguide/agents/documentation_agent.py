"""
Agent 1: Documentation Acquisition

Turns a URL or pasted text into one bounded plain-text document for the
summary and chat agents.

Architecture (first strategy to produce a result wins):
1. Direct text: pasted text is used as-is, no network
2. Managed extractor: Firecrawl renders the page to markdown (needs a key)
3. Basic fetch: plain GET with a rotation of User-Agents, HTML reduced to text
4. Otherwise fail with a message telling the user to paste the text instead
"""

import logging
from collections.abc import Awaitable, Callable

import httpx

from apiguide.agents.base import BaseAgent
from apiguide.exceptions import AcquisitionError, ExtractorError, ValidationError
from apiguide.models import AcquisitionRequest, AcquisitionResult, ContentSource, Credentials
from apiguide.services import FirecrawlClient, HTTPClient
from apiguide.utils.html_reducer import reduce_html
from apiguide.utils.page_metadata import extract_page_title
from apiguide.utils.url_helpers import extract_domain, is_http_url

logger = logging.getLogger(__name__)

ACQUISITION_FAILED_MESSAGE = (
    "Unable to fetch documentation from this URL. Please use \"Paste Text\" mode "
    "instead - copy the documentation content from the website and paste it directly."
)

Strategy = Callable[[AcquisitionRequest, Credentials], Awaitable[AcquisitionResult | None]]


class DocumentationAgent(BaseAgent):
    """
    Agent for acquiring API documentation as bounded text.

    **Workflow:**
    1. **Direct text**: if ``text`` is non-empty after trimming, return it
       (``source=direct``). Takes precedence over ``url``.
    2. **Managed extractor**: if an extractor key is available, ask Firecrawl
       for markdown. Accepted only when longer than ``extractor_min_chars``;
       truncated to ``extractor_max_chars``.
    3. **Basic fetch**: GET the URL once per User-Agent, in order. The first
       2xx response whose reduced text is longer than ``basic_fetch_min_chars``
       wins.
    4. **Exhaustion**: raise ``AcquisitionError``.

    Strategy failures are logged and never surface on their own; only
    exhaustion is visible to the caller. Nothing is retried with backoff.

    **Example:**
        >>> agent = DocumentationAgent()
        >>> result = await agent.execute(AcquisitionRequest(url="https://docs.stripe.com/api"))
        >>> print(result.source, len(result.content))
    """

    def __init__(
        self,
        http_client: HTTPClient | None = None,
        user_agents: list[str] | None = None,
        **kwargs,
    ) -> None:
        """
        Initialize Documentation Agent.

        Args:
            http_client: HTTP client for fetches and extractor calls
            user_agents: User-Agent values for basic fetch, tried in order
                (default from settings)
            **kwargs: Additional arguments for BaseAgent (verbose)
        """
        super().__init__(**kwargs)

        self.http_client = http_client or HTTPClient()
        self.user_agents = list(user_agents or self.settings.fetch_user_agents)
        self.strategies: list[Strategy] = [
            self._from_direct_text,
            self._from_managed_extractor,
            self._from_basic_fetch,
        ]

    async def execute(
        self,
        request: AcquisitionRequest,
        credentials: Credentials | None = None,
    ) -> AcquisitionResult:
        """
        Acquire documentation content.

        Args:
            request: URL or pasted text
            credentials: Per-call keys (only the extractor key is used here)

        Returns:
            AcquisitionResult with bounded content and its source

        Raises:
            ValidationError: If neither a URL nor non-empty text is given,
                or the URL is not absolute
            AcquisitionError: If every strategy failed
        """
        credentials = credentials or Credentials()

        if not request.direct_text:
            self._validate_url(request.url)

        for strategy in self.strategies:
            result = await strategy(request, credentials)
            if result is not None:
                self._log(f"✅ Acquired {len(result.content)} chars via {result.source.value}")
                return result

        domain = extract_domain(request.url.strip())
        logger.warning(f"All acquisition strategies failed for {domain}")
        raise AcquisitionError(ACQUISITION_FAILED_MESSAGE)

    def _validate_url(self, url: str | None) -> None:
        if not url or not url.strip():
            raise ValidationError("URL or text content is required")
        if not is_http_url(url.strip()):
            raise ValidationError(f"Invalid URL: {url.strip()}")

    async def _from_direct_text(
        self, request: AcquisitionRequest, credentials: Credentials
    ) -> AcquisitionResult | None:
        text = request.direct_text
        if not text:
            return None
        return AcquisitionResult(content=text, source=ContentSource.DIRECT)

    async def _from_managed_extractor(
        self, request: AcquisitionRequest, credentials: Credentials
    ) -> AcquisitionResult | None:
        api_key = credentials.get_extractor_key() or self.settings.firecrawl_api_key
        if not api_key:
            self._log("No extractor key configured, skipping managed extractor")
            return None

        url = request.url.strip()
        self._log(f"Scraping {url} with managed extractor...")
        client = FirecrawlClient(api_key=api_key, http_client=self.http_client)

        try:
            scraped = await client.scrape_markdown(url)
        except ExtractorError as e:
            # InsufficientCreditsError lands here too
            logger.warning(f"Managed extractor failed for {url}: {e}")
            return None

        if len(scraped.markdown) <= self.settings.extractor_min_chars:
            logger.info(
                f"Managed extractor returned only {len(scraped.markdown)} chars for {url}, "
                "falling back to basic fetch"
            )
            return None

        return AcquisitionResult(
            content=scraped.markdown[: self.settings.extractor_max_chars],
            source=ContentSource.MANAGED_EXTRACTOR,
            title=scraped.title,
        )

    async def _from_basic_fetch(
        self, request: AcquisitionRequest, credentials: Credentials
    ) -> AcquisitionResult | None:
        url = request.url.strip()

        for attempt, user_agent in enumerate(self.user_agents, start=1):
            self._log(f"Basic fetch attempt {attempt}/{len(self.user_agents)}: {user_agent[:40]}")
            try:
                response = await self.http_client.get(url, headers={"User-Agent": user_agent})
            except httpx.HTTPError as e:
                logger.debug(f"Basic fetch attempt {attempt} failed for {url}: {e}")
                continue

            html = response.text
            text = reduce_html(html, max_chars=self.settings.reducer_max_chars)
            if len(text) <= self.settings.basic_fetch_min_chars:
                logger.debug(
                    f"Basic fetch attempt {attempt} for {url} reduced to only {len(text)} chars"
                )
                continue

            return AcquisitionResult(
                content=text,
                source=ContentSource.BASIC_FETCH,
                title=extract_page_title(html),
            )

        return None
