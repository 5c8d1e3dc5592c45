"""
Story generation service
"""
import logging

from storyweaver.models import StoryRequest
from storyweaver.services.completion_service import CompletionProvider
from storyweaver.services.prompt_service import build_story_prompt, max_tokens_for

logger = logging.getLogger(__name__)

# Slightly higher than usual for more creative output
STORY_TEMPERATURE = 0.75


class StoryService:
    """Composes the prompt for a request and asks the provider for a story"""

    def __init__(self, provider: CompletionProvider):
        self.provider = provider

    async def generate_story(self, request: StoryRequest) -> str:
        """Generate a story for a validated request; returns "" if the provider sent nothing back"""
        prompt = build_story_prompt(request)
        logger.info(f"Sending story prompt to completion service:\n{prompt}")

        story = await self.provider.complete(
            prompt,
            max_tokens=max_tokens_for(request.length),
            temperature=STORY_TEMPERATURE,
        )

        if story:
            logger.info(f"Received story (first 100 chars): {story[:100]}")
        else:
            logger.warning("Completion service returned no content")
        return story
