"""
Story request validation

Turns pydantic error records into the field-keyed detail returned to clients:

    {"formErrors": [...], "fieldErrors": {"coreIdea": [...]}}
"""
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from storyweaver.exceptions import InvalidStoryRequest
from storyweaver.models import StoryRequest


def flatten_errors(errors: Iterable[Mapping[str, Any]]) -> dict:
    """Group error messages by the wire name of the offending field"""
    form_errors = []
    field_errors = {}

    for error in errors:
        loc = list(error.get("loc", ()))
        # FastAPI prefixes body errors with "body"
        if loc and loc[0] == "body":
            loc = loc[1:]

        message = error.get("msg", "Invalid value")
        if loc and isinstance(loc[0], str):
            field_errors.setdefault(loc[0], []).append(message)
        else:
            form_errors.append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


def parse_story_request(payload: Any) -> StoryRequest:
    """Validate a raw payload, raising InvalidStoryRequest with every failing field"""
    try:
        return StoryRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidStoryRequest(flatten_errors(e.errors())) from e
