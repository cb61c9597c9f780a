"""
Content generation endpoints.

Anonymous callers get a small number of free generations per day, counted
by IP address. Any valid bearer token lifts the limit.
"""
import logging
from functools import lru_cache
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from ideaspark.core import config
from ideaspark.core.auth_dependency import get_db, get_optional_claims
from ideaspark.core.client_ip import get_client_ip
from ideaspark.core.logging_config import sanitize_log_data
from ideaspark.core.security import TokenClaims
from ideaspark.llm.provider import LLMProvider
from ideaspark.llm.router import build_provider
from ideaspark.schemas.content import GenerateContentRequest, GenerateContentResponse, UsageResponse
from ideaspark.services.content_service import CallerContext, ContentService
from ideaspark.services.usage_gate import UsageGate, utc_today

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Content"])


@lru_cache(maxsize=1)
def get_llm_provider() -> Optional[LLMProvider]:
    """Configured provider, built once per process (None when no API key)."""
    return build_provider(
        config.LLM_PROVIDER,
        openai_api_key=config.OPENAI_API_KEY,
        openai_model=config.OPENAI_MODEL,
        gemini_api_key=config.GEMINI_API_KEY,
        gemini_model=config.GEMINI_MODEL,
    )


def get_usage_gate(db: Session = Depends(get_db)) -> UsageGate:
    return UsageGate(db, daily_limit=config.FREE_DAILY_GENERATIONS)


def get_content_service(
    usage_gate: UsageGate = Depends(get_usage_gate),
    provider: Optional[LLMProvider] = Depends(get_llm_provider),
) -> ContentService:
    return ContentService(usage_gate, provider)


def get_caller(
    request: Request,
    claims: Optional[TokenClaims] = Depends(get_optional_claims),
) -> CallerContext:
    return CallerContext(
        ip_address=get_client_ip(request, trust_forwarded_for=config.TRUST_FORWARDED_FOR),
        is_authenticated=claims is not None,
        user_id=claims.user_id if claims else None,
    )


@router.post("/generate-content", response_model=GenerateContentResponse)
async def generate_content(
    payload: GenerateContentRequest,
    caller: CallerContext = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
):
    """
    Generate five content ideas for a keyword.

    Returns the raw provider text and the parsed ideas. Over the anonymous
    daily limit the response is 429 with ``requiresAuth: true``.
    """
    logger.debug(
        f"Generate request: {sanitize_log_data(payload.model_dump(by_alias=True))}, "
        f"authenticated={caller.is_authenticated}"
    )
    result = await service.generate(payload.main_keyword, payload.trending_keywords, caller)
    return result.model_dump()


@router.get("/usage", response_model=UsageResponse)
async def get_usage(
    caller: CallerContext = Depends(get_caller),
    usage_gate: UsageGate = Depends(get_usage_gate),
):
    """Remaining free generations for the caller today."""
    if caller.is_authenticated:
        return UsageResponse(authenticated=True)

    used = await run_in_threadpool(usage_gate.get_count, caller.ip_address, utc_today())
    return UsageResponse(
        authenticated=False,
        limit=usage_gate.daily_limit,
        used=used,
        remaining=max(0, usage_gate.daily_limit - used),
    )
