"""
Google Gemini provider implementation.
"""
import logging
from typing import Optional

import google.generativeai as genai

from ideaspark.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Gemini provider using the google-generativeai SDK."""

    name = "gemini"

    def __init__(self, api_key: str, model: str = "gemini-1.5-flash"):
        if not api_key:
            raise ValueError("GEMINI_API_KEY not configured")
        genai.configure(api_key=api_key)
        self.model = model
        self._model = genai.GenerativeModel(model)
        logger.info(f"Gemini provider initialized (model: {model})")

    async def complete(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        generation_config = {"temperature": temperature, "max_output_tokens": max_tokens or 2000}
        try:
            response = await self._model.generate_content_async(
                prompt,
                generation_config=generation_config,
                **kwargs
            )
        except Exception as exc:
            logger.error(f"Gemini API error (model={self.model}): {exc}")
            raise

        # response.text raises ValueError when the candidate was blocked or empty
        content = response.text

        usage = getattr(response, "usage_metadata", None)
        return LLMResponse(
            content=content,
            tokens_in=getattr(usage, "prompt_token_count", 0) or 0,
            tokens_out=getattr(usage, "candidates_token_count", 0) or 0,
            model=self.model,
        )
