"""
Provider selection from configuration.
"""
import logging
from typing import Optional

from ideaspark.llm.provider import LLMProvider

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "gemini")


def build_provider(
    name: str,
    openai_api_key: Optional[str] = None,
    openai_model: str = "gpt-4o-mini",
    gemini_api_key: Optional[str] = None,
    gemini_model: str = "gemini-1.5-flash",
) -> Optional[LLMProvider]:
    """
    Build the configured provider.

    Returns:
        Provider instance, or None when the provider's API key is not set

    Raises:
        ValueError: Unknown provider name
    """
    name = (name or "openai").lower()
    if name not in SUPPORTED_PROVIDERS:
        raise ValueError(f"Unknown LLM_PROVIDER '{name}', expected one of {SUPPORTED_PROVIDERS}")

    if name == "gemini":
        if not gemini_api_key:
            logger.warning("GEMINI_API_KEY not configured - content generation disabled")
            return None
        # Lazy import: only pull in the SDK when it is selected
        from ideaspark.llm.gemini_provider import GeminiProvider
        return GeminiProvider(api_key=gemini_api_key, model=gemini_model)

    if not openai_api_key:
        logger.warning("OPENAI_API_KEY not configured - content generation disabled")
        return None
    from ideaspark.llm.openai_provider import OpenAIProvider
    return OpenAIProvider(api_key=openai_api_key, model=openai_model)
