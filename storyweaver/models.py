"""
Pydantic Models for StoryWeaver API
"""
import re
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


class StoryLength(str, Enum):
    """Length tier of a generated story"""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class StoryTone(str, Enum):
    """Optional mood applied to the generation prompt"""
    ANY = "any"
    HUMOROUS = "humorous"
    SERIOUS = "serious"
    SUSPENSEFUL = "suspenseful"
    WHIMSICAL = "whimsical"
    DARK = "dark"


# Target word count per length tier
LENGTH_WORDS: Dict[StoryLength, int] = {
    StoryLength.SHORT: 300,
    StoryLength.MEDIUM: 800,
    StoryLength.LONG: 1500,
}

# Extra tokens allowed on top of the word target
MAX_TOKENS_BUFFER = 250

MIN_CORE_IDEA_LENGTH = 10

LENGTH_LABELS: Dict[StoryLength, str] = {
    StoryLength.SHORT: "Short (~300 words)",
    StoryLength.MEDIUM: "Medium (~800 words)",
    StoryLength.LONG: "Long (~1500 words)",
}

TONE_LABELS: Dict[StoryTone, str] = {
    StoryTone.ANY: "Let AI Decide / Neutral",
    StoryTone.HUMOROUS: "Humorous",
    StoryTone.SERIOUS: "Serious",
    StoryTone.SUSPENSEFUL: "Suspenseful",
    StoryTone.WHIMSICAL: "Whimsical",
    StoryTone.DARK: "Dark",
}

GENRE_LABELS: List[str] = [
    "Fantasy", "Sci-Fi", "Mystery", "Romance", "Thriller",
    "Historical", "Horror", "Adventure", "Slice of Life", "Fable",
]


def genre_slug(label: str) -> str:
    """Turn a genre label into the value sent by clients ("Slice of Life" -> "slice-of-life")"""
    return re.sub(r"\s+", "-", label.lower())


class StoryRequest(BaseModel):
    """Request model for story generation"""
    core_idea: str = Field(..., alias="coreIdea", description="Main premise or what-if scenario")
    genre: str = Field(..., description="Story genre")
    length: StoryLength = Field(..., description="Story length (short, medium, long)")
    protagonist: Optional[str] = Field(None, description="Brief description of the main character")
    key_conflict: Optional[str] = Field(None, alias="keyConflict", description="The central problem or challenge")
    world_vibe: Optional[str] = Field(None, alias="worldVibe", description="Atmosphere of the setting")
    tone: StoryTone = Field(StoryTone.ANY, description="Story tone")

    @field_validator("core_idea")
    @classmethod
    def core_idea_is_detailed(cls, value: str) -> str:
        if len(value) < MIN_CORE_IDEA_LENGTH:
            raise PydanticCustomError(
                "core_idea_too_short",
                "Please provide a more detailed core idea (min 10 characters).",
            )
        return value

    @field_validator("genre")
    @classmethod
    def genre_is_present(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("genre_required", "Genre is required")
        return value

    @field_validator("tone", mode="before")
    @classmethod
    def tone_defaults_to_any(cls, value):
        # An explicit null means "not chosen"
        return StoryTone.ANY if value is None else value


class StoryResponse(BaseModel):
    """Response model for a generated story"""
    story: str = Field(..., description="The generated story text")


class ErrorResponse(BaseModel):
    """Error body returned by the API"""
    error: str = Field(..., description="Error message")
    details: Optional[dict] = Field(None, description="Field-keyed validation errors")


class OptionItem(BaseModel):
    value: str
    label: str


class LengthOption(OptionItem):
    words: int = Field(..., description="Target word count")


class StoryOptionsResponse(BaseModel):
    """Choices offered to clients building a story request"""
    genres: List[OptionItem] = Field(..., description="Suggested genres")
    lengths: List[LengthOption] = Field(..., description="Length tiers with word targets")
    tones: List[OptionItem] = Field(..., description="Available tones")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Check timestamp")
    services: dict = Field(..., description="Individual service statuses")
