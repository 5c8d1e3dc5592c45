"""
Story Routes
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from storyweaver.dependencies import get_story_service
from storyweaver.exceptions import UpstreamError
from storyweaver.models import (
    GENRE_LABELS,
    LENGTH_LABELS,
    LENGTH_WORDS,
    TONE_LABELS,
    ErrorResponse,
    LengthOption,
    OptionItem,
    StoryOptionsResponse,
    StoryResponse,
    genre_slug,
)
from storyweaver.services.story_service import StoryService
from storyweaver.validation import parse_story_request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-story",
    response_model=StoryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_story(
    payload: Any = Body(None, description="Story elements: coreIdea, genre, length, protagonist, keyConflict, worldVibe, tone"),
    story_service: StoryService = Depends(get_story_service),
):
    """Generate a story from the submitted elements"""
    story_request = parse_story_request(payload)

    try:
        story = await story_service.generate_story(story_request)
        return StoryResponse(story=story)

    except UpstreamError as e:
        logger.error(f"[API_GENERATE_STORY_ERROR] {e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})
    except Exception as e:
        logger.exception("[API_GENERATE_STORY_ERROR] unexpected failure")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to generate story"})


@router.get("/story-options", response_model=StoryOptionsResponse)
async def get_story_options():
    """Genres, lengths and tones a client can offer when building a request"""
    return StoryOptionsResponse(
        genres=[OptionItem(value=genre_slug(label), label=label) for label in GENRE_LABELS],
        lengths=[
            LengthOption(value=length.value, label=LENGTH_LABELS[length], words=words)
            for length, words in LENGTH_WORDS.items()
        ],
        tones=[OptionItem(value=tone.value, label=label) for tone, label in TONE_LABELS.items()],
    )
