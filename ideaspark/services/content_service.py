"""
Content generation proxy.

Builds the content-strategist prompt, calls the configured text-completion
provider and parses its reply into ideas. Anonymous callers pass through the
daily usage gate; their quota is only consumed after the provider answered.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from ideaspark.core.errors import ConfigurationError, UpstreamError, ValidationError
from ideaspark.llm.provider import LLMProvider
from ideaspark.services.idea_parser import Idea, MAX_IDEAS, parse_content_ideas
from ideaspark.services.usage_gate import UsageGate, utc_today

logger = logging.getLogger(__name__)

NO_TRENDING_TERMS = "No specific trending terms provided"

PROMPT_TEMPLATE = """You are a content strategist assistant. Based on the following trending topics and keyword, generate 5 highly creative and relevant content ideas. Focus on originality, engagement, and trend relevance.

Main Keyword: "{main_keyword}"

Trending Terms (from Google Trends): {trending_keywords}

Use a mix of formats like videos, blog posts, carousels, or threads. Vary the approach: practical, emotional, data-driven, controversial, or inspiring.

For each idea, give:

Title: [Catchy, specific, trend-aware title]
Format: [Blog, Video, Twitter Thread, Reel, etc.]
Angle: [Unique POV or creative hook]

Respond in this format for 5 content ideas:
---
Title:
Format:
Angle:
---"""


@dataclass(frozen=True)
class CallerContext:
    """Who is asking: the quota key and whether a valid token was presented."""
    ip_address: str
    is_authenticated: bool = False
    user_id: Optional[int] = None


class GenerationResult(BaseModel):
    content: str
    ideas: List[Idea]


def build_prompt(main_keyword: str, trending_keywords: Optional[str] = None) -> str:
    trending = (trending_keywords or "").strip() or NO_TRENDING_TERMS
    return PROMPT_TEMPLATE.format(main_keyword=main_keyword, trending_keywords=trending)


class ContentService:
    def __init__(
        self,
        usage_gate: UsageGate,
        provider: Optional[LLMProvider],
        today: Callable[[], date] = utc_today,
    ):
        self.usage_gate = usage_gate
        self.provider = provider
        self.today = today

    async def generate(
        self,
        main_keyword: Optional[str],
        trending_keywords: Optional[str],
        caller: CallerContext,
    ) -> GenerationResult:
        """
        Generate up to five content ideas.

        Raises:
            ValidationError: Blank main keyword (before any quota read)
            LimitExceededError: Anonymous daily limit reached
            ConfigurationError: No provider configured
            UpstreamError: Provider failed or returned no text
        """
        keyword = (main_keyword or "").strip()
        if not keyword:
            raise ValidationError("Main keyword is required")

        usage_date = self.today()
        await run_in_threadpool(
            self.usage_gate.check, caller.ip_address, usage_date, caller.is_authenticated
        )

        if self.provider is None:
            logger.error("Content generation requested but no provider API key is configured")
            raise ConfigurationError()

        prompt = build_prompt(keyword, trending_keywords)
        try:
            response = await self.provider.complete(prompt)
        except Exception as e:
            logger.error(f"Provider call failed ({self.provider.name}): {type(e).__name__}: {e}", exc_info=True)
            raise UpstreamError()

        content = response.content if response else None
        if not isinstance(content, str) or not content.strip():
            logger.error(f"Provider returned an empty or malformed response ({self.provider.name})")
            raise UpstreamError()

        if not caller.is_authenticated:
            await run_in_threadpool(self.usage_gate.record_generation, caller.ip_address, usage_date)

        ideas = parse_content_ideas(content, limit=MAX_IDEAS)
        logger.info(
            f"Generated content ideas: parsed={len(ideas)}, authenticated={caller.is_authenticated}, "
            f"tokens_in={response.tokens_in}, tokens_out={response.tokens_out}"
        )
        return GenerationResult(content=content, ideas=ideas)
