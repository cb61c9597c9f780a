"""
Pydantic schemas for content generation and usage endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from ideaspark.services.idea_parser import Idea


class GenerateContentRequest(BaseModel):
    """Request schema for content idea generation."""
    # Blank keywords are rejected by the service so the check runs before quota
    main_keyword: Optional[str] = Field(default=None, alias="mainKeyword")
    trending_keywords: Optional[str] = Field(default=None, alias="trendingKeywords")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "mainKeyword": "sustainable fashion",
                "trendingKeywords": "thrift haul, capsule wardrobe"
            }
        }


class GenerateContentResponse(BaseModel):
    content: str = Field(..., description="Raw provider text")
    ideas: List[Idea] = Field(default_factory=list, description="Parsed ideas, at most 5")


class UsageResponse(BaseModel):
    """Free generations for the caller today. Limits are null when signed in."""
    authenticated: bool
    limit: Optional[int] = None
    used: Optional[int] = None
    remaining: Optional[int] = None
