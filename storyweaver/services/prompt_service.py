"""
Prompt composition for story generation
"""
from storyweaver.models import LENGTH_WORDS, MAX_TOKENS_BUFFER, StoryLength, StoryRequest, StoryTone


def target_word_count(length: StoryLength) -> int:
    """Approximate number of words requested for a length tier"""
    return LENGTH_WORDS[StoryLength(length)]


def max_tokens_for(length: StoryLength) -> int:
    """Generation budget: the word target plus a fixed buffer"""
    return target_word_count(length) + MAX_TOKENS_BUFFER


def build_story_prompt(request: StoryRequest) -> str:
    """Build the storyteller prompt for a validated request.

    Optional elements are appended in a fixed order (protagonist, conflict,
    setting, tone) and only when they were supplied.
    """
    length = StoryLength(request.length)

    prompt = (
        f"You are a master storyteller. Based on the following elements, "
        f"write a {length.value} story in the {request.genre} genre.\n"
        f"The story should be approximately {target_word_count(length)} words "
        f"and have a clear beginning, middle, and end.\n"
        f"\n"
        f"Core Idea/Premise: {request.core_idea}\n"
    )

    if request.protagonist:
        prompt += f"\nMain Character (Protagonist): {request.protagonist}"
    if request.key_conflict:
        prompt += f"\nKey Conflict/Challenge: {request.key_conflict}"
    if request.world_vibe:
        prompt += f"\nSetting's Atmosphere/Vibe: {request.world_vibe}"
    if request.tone and StoryTone(request.tone) != StoryTone.ANY:
        prompt += f"\nDesired Tone: {StoryTone(request.tone).value}"

    prompt += (
        "\n\nFocus on making the story engaging, well-structured, and imaginative. "
        "Bring the characters and world to life.\n"
        "Begin the story now:\n"
    )
    return prompt
