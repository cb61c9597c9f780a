"""
OpenAI provider implementation.
"""
import logging
from typing import Optional
from openai import AsyncOpenAI, APIError

from ideaspark.llm.provider import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI provider using the official async SDK."""

    name = "openai"

    def __init__(self, api_key: str, model: str = "gpt-4o-mini"):
        if not api_key:
            raise ValueError("OPENAI_API_KEY not configured")
        self.model = model
        self.client = AsyncOpenAI(api_key=api_key)
        logger.info(f"OpenAI provider initialized (model: {model})")

    async def complete(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a chat completion from a single user message."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens or 2000,
                **kwargs
            )
        except APIError as e:
            logger.error(f"OpenAI API error: {e}", exc_info=True)
            raise

        if not response.choices:
            raise ValueError("OpenAI response contained no choices")

        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=self.model,
            metadata={
                "finish_reason": response.choices[0].finish_reason,
            }
        )
