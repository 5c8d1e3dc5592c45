"""FastAPI dependency providers.

Settings are read once per process; the completion provider holds one HTTP
connection pool and is shared by all requests. Tests replace any of these
through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from storyweaver.config import Settings
from storyweaver.services.completion_service import CompletionProvider, OpenAICompletionProvider
from storyweaver.services.story_service import StoryService


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def _provider_for(settings: Settings) -> CompletionProvider:
    return OpenAICompletionProvider(settings)


def get_completion_provider(settings: Settings = Depends(get_settings)) -> CompletionProvider:
    return _provider_for(settings)


def get_story_service(provider: CompletionProvider = Depends(get_completion_provider)) -> StoryService:
    return StoryService(provider)


async def close_completion_provider() -> None:
    """Close the shared provider's HTTP client, if one was created"""
    if _provider_for.cache_info().currsize:
        await _provider_for(get_settings()).close()
    _provider_for.cache_clear()
