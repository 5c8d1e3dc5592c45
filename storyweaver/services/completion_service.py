"""
Chat-completion providers
The story service talks to a CompletionProvider so tests can swap in a stub
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
import openai
from openai import AsyncOpenAI

from storyweaver.config import Settings
from storyweaver.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class CompletionProvider(ABC):
    """Something that turns a prompt into generated text"""

    @abstractmethod
    async def complete(self, prompt: str, *, max_tokens: int, temperature: float) -> str:
        """Return the generated text, or an empty string when nothing came back"""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Raise UpstreamError if the provider cannot be reached"""

    async def close(self) -> None:
        pass


def extract_content(response) -> str:
    """Pull the stripped text of the first choice out of a completion response"""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return ""
    return content.strip()


def _describe(error: openai.APIError, prefix: str = "Failed to generate story") -> str:
    if isinstance(error, openai.APIStatusError):
        return f"{prefix}: {error.message} (Status: {error.status_code})"
    return f"{prefix}: {error.message or 'An unknown error occurred'}"


class OpenAICompletionProvider(CompletionProvider):
    """Provider backed by any OpenAI-compatible chat-completion endpoint (e.g. a Gaia node)"""

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.model = settings.model
        self.client = AsyncOpenAI(
            api_key=settings.api_key,
            base_url=settings.api_endpoint,
            timeout=httpx.Timeout(settings.request_timeout),
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, prompt: str, *, max_tokens: int, temperature: float) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except (openai.APIResponseValidationError, ValueError) as e:
            # Unparseable 200 body degrades to an empty story
            logger.warning(f"Malformed completion response: {e}")
            return ""
        except openai.APIStatusError as e:
            logger.error(f"Completion API error: status={e.status_code} message={e.message}")
            raise UpstreamError(_describe(e), status_code=e.status_code) from e
        except openai.APIError as e:
            logger.error(f"Error calling completion API: {e.message}")
            raise UpstreamError(_describe(e)) from e

        return extract_content(response)

    async def check_connection(self) -> bool:
        try:
            await self.client.models.list()
        except openai.APIError as e:
            raise UpstreamError(
                _describe(e, "Completion service unavailable"),
                status_code=getattr(e, "status_code", None),
            ) from e
        return True

    async def close(self) -> None:
        await self.client.close()
