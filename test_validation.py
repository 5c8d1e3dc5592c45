"""Tests for story request validation."""

import pytest

from storyweaver.exceptions import InvalidStoryRequest
from storyweaver.models import StoryLength, StoryTone
from storyweaver.validation import flatten_errors, parse_story_request

VALID = {"coreIdea": "A detective who talks to ghosts", "genre": "mystery", "length": "short"}


def details_for(payload):
    with pytest.raises(InvalidStoryRequest) as exc_info:
        parse_story_request(payload)
    return exc_info.value.details


class TestParseStoryRequest:

    def test_valid_payload(self):
        request = parse_story_request({**VALID, "protagonist": "Inspector Vale", "tone": "dark"})

        assert request.core_idea == "A detective who talks to ghosts"
        assert request.length == StoryLength.SHORT
        assert request.protagonist == "Inspector Vale"
        assert request.key_conflict is None
        assert request.tone == StoryTone.DARK

    def test_tone_defaults_to_any(self):
        assert parse_story_request(VALID).tone == StoryTone.ANY

    def test_null_tone_defaults_to_any(self):
        assert parse_story_request({**VALID, "tone": None}).tone == StoryTone.ANY

    def test_unknown_fields_are_ignored(self):
        request = parse_story_request({**VALID, "antagonist": "The Butler"})

        assert not hasattr(request, "antagonist")

    def test_snake_case_names_are_not_wire_names(self):
        details = details_for({
            "core_idea": "A detective who talks to ghosts",
            "genre": "mystery",
            "length": "short",
            "key_conflict": "The ghosts are lying",
        })

        assert details["fieldErrors"] == {"coreIdea": ["Field required"]}

    def test_short_core_idea_is_rejected(self):
        details = details_for({**VALID, "coreIdea": "Ghosts"})

        assert details["fieldErrors"] == {
            "coreIdea": ["Please provide a more detailed core idea (min 10 characters)."]
        }

    def test_core_idea_of_exactly_ten_characters_is_accepted(self):
        assert parse_story_request({**VALID, "coreIdea": "0123456789"}).core_idea == "0123456789"

    def test_missing_genre_is_rejected(self):
        payload = dict(VALID)
        del payload["genre"]

        assert "genre" in details_for(payload)["fieldErrors"]

    def test_empty_genre_is_rejected(self):
        assert details_for({**VALID, "genre": ""})["fieldErrors"]["genre"] == ["Genre is required"]

    @pytest.mark.parametrize("length", ["epic", "", "SHORT", None])
    def test_length_outside_tiers_is_rejected(self, length):
        assert "length" in details_for({**VALID, "length": length})["fieldErrors"]

    def test_unknown_tone_is_rejected(self):
        assert "tone" in details_for({**VALID, "tone": "melancholy"})["fieldErrors"]

    def test_every_failing_field_is_reported(self):
        details = details_for({"coreIdea": "short", "length": "epic"})

        assert set(details["fieldErrors"]) == {"coreIdea", "genre", "length"}
        assert details["formErrors"] == []

    def test_non_object_payload_is_a_form_error(self):
        details = details_for(["not", "an", "object"])

        assert details["fieldErrors"] == {}
        assert len(details["formErrors"]) == 1


class TestFlattenErrors:

    def test_strips_fastapi_body_prefix(self):
        errors = [
            {"loc": ("body", "coreIdea"), "msg": "too short", "type": "x"},
            {"loc": ("body", "coreIdea"), "msg": "still too short", "type": "x"},
            {"loc": ("body", "length"), "msg": "bad length", "type": "x"},
        ]

        assert flatten_errors(errors) == {
            "formErrors": [],
            "fieldErrors": {"coreIdea": ["too short", "still too short"], "length": ["bad length"]},
        }

    def test_errors_without_a_field_go_to_form_errors(self):
        errors = [
            {"loc": ("body", 12), "msg": "JSON decode error", "type": "json_invalid"},
            {"loc": ("body",), "msg": "Field required", "type": "missing"},
        ]

        assert flatten_errors(errors) == {
            "formErrors": ["JSON decode error", "Field required"],
            "fieldErrors": {},
        }
