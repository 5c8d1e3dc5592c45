"""
StoryWeaver exceptions
"""
from typing import Optional


class StoryWeaverError(Exception):
    """Base exception for StoryWeaver errors"""
    pass


class ConfigurationError(StoryWeaverError):
    """Raised when required settings are missing or invalid"""
    pass


class InvalidStoryRequest(StoryWeaverError):
    """Raised when a story request payload fails validation"""

    def __init__(self, details: dict):
        super().__init__("Invalid request body")
        self.details = details


class UpstreamError(StoryWeaverError):
    """Raised when the completion service fails or cannot be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
