"""
Test doubles shared across test modules.
"""
from ideaspark.llm.provider import LLMProvider, LLMResponse

SAMPLE_IDEAS_TEXT = """Here are your ideas:
---
Title: 10 Thrift Hauls That Beat Fast Fashion
Format: Video
Angle: Side-by-side cost and quality comparison
---
Title: The Capsule Wardrobe Myth
Format: Blog
Angle: Controversial take on minimalism
---
Title: Style Swap Challenge
Format: Reel
Angle: Viewers vote on outfits
---
Title: Where Donated Clothes Really Go
Format: Twitter Thread
Angle: Data-driven investigation
---
Title: My 30-Day No-Buy Month
Format: Carousel
Angle: Personal and emotional diary
---"""


class FakeProvider(LLMProvider):
    """Records prompts and returns canned text, or raises a configured error."""

    name = "fake"

    def __init__(self, content: str = SAMPLE_IDEAS_TEXT, error: Exception = None):
        self.content = content
        self.error = error
        self.calls = []

    async def complete(self, prompt, temperature=0.7, max_tokens=None, **kwargs):
        self.calls.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, tokens_in=10, tokens_out=20, model="fake-model")
