import asyncio
import json
import time
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from layout_planner.agents.layout_advisor import LayoutAdvisor
from layout_planner.agents.prompts import build_layout_prompt, build_simplified_prompt
from layout_planner.agents.response_parser import extract_json_text, parse_ai_response
from layout_planner.config import Settings
from layout_planner.models.room import RoomSpec


ROOM = RoomSpec(length=6.0, width=4.0, budget=3000)

VALID_ANSWER = json.dumps({
    "suggestedFurniture": [
        {"name": "Oslo Sofa", "x": 3.0, "y": 0.95, "reasoning": "Against the long wall"},
        {"name": "Oak Coffee Table", "x": 3.0, "y": 2.45},
    ],
    "totalEstimatedCost": 1000,
    "reasoning": "Conversation area facing the TV",
})


# ============ Prompts ============

def test_layout_prompt_lists_room_and_furniture(full_furniture):
    prompt = build_layout_prompt(ROOM, full_furniture)

    assert "6.0 meters (length) x 4.0 meters (width)" in prompt
    assert "Budget: $3000" in prompt
    assert "Usable space: 5.0 meters x 3.0 meters" in prompt
    assert "- Oslo Sofa (Category: sofa)" in prompt
    assert "Dimensions: 2.00 m (width) x 0.90 m (depth)" in prompt
    assert "CENTER of each furniture piece" in prompt
    assert '"suggestedFurniture"' in prompt


def test_simplified_prompt(full_furniture):
    prompt = build_simplified_prompt(ROOM, full_furniture)

    assert prompt.startswith("Create a furniture layout for a 6.0m x 4.0m room with a $3000 budget.")
    assert "Oslo Sofa, Oak Coffee Table" in prompt
    assert "none" in build_simplified_prompt(ROOM, [])


# ============ Response parsing ============

def test_extract_json_from_fenced_answer():
    assert extract_json_text('```json\n{"a": 1}\n```') == '{"a": 1}'


def test_extract_json_from_prose():
    text = 'Here is my layout: {"a": {"b": 2}} Hope it helps!'
    assert extract_json_text(text) == '{"a": {"b": 2}}'


def test_parse_valid_answer():
    suggestion = parse_ai_response(VALID_ANSWER, ROOM)

    assert [s.name for s in suggestion.suggested_furniture] == ["Oslo Sofa", "Oak Coffee Table"]
    assert suggestion.suggested_furniture[0].reasoning == "Against the long wall"
    assert suggestion.suggested_furniture[1].reasoning == ""
    assert suggestion.total_estimated_cost == 1000
    assert suggestion.reasoning == "Conversation area facing the TV"


def test_parse_clamps_out_of_range_coordinates():
    answer = json.dumps({"suggestedFurniture": [{"name": "Lamp", "x": 9.0, "y": 0.1}]})
    lamp = parse_ai_response(answer, ROOM).suggested_furniture[0]

    assert lamp.x == pytest.approx(5.5)
    assert lamp.y == pytest.approx(0.5)


def test_parse_drops_malformed_items():
    answer = json.dumps({
        "suggestedFurniture": [
            {"name": "No Coordinates"},
            {"name": "Bad X", "x": "left", "y": 1.0},
            "not an object",
            {"name": "Good", "x": 2.0, "y": 2.0},
        ],
        "totalEstimatedCost": "lots",
    })
    suggestion = parse_ai_response(answer, ROOM)

    assert [s.name for s in suggestion.suggested_furniture] == ["Good"]
    assert suggestion.total_estimated_cost == 0


def test_parse_rejects_non_json():
    with pytest.raises(ValueError):
        parse_ai_response("I cannot help with that.", ROOM)


def test_parse_rejects_json_array():
    with pytest.raises(ValueError):
        parse_ai_response("[1, 2, 3]", ROOM)


# ============ Advisor ============

def make_advisor(**overrides):
    settings = Settings(google_api_key="test-key", model_name="gemini-2.5-flash", **overrides)
    with patch("layout_planner.agents.layout_advisor.genai.Client") as client_cls:
        advisor = LayoutAdvisor(settings)
    return advisor, client_cls.return_value


def answer(text):
    return SimpleNamespace(text=text)


def test_client_http_timeout_matches_settings():
    settings = Settings(google_api_key="test-key", ai_timeout_seconds=12.5)
    with patch("layout_planner.agents.layout_advisor.genai.Client") as client_cls:
        LayoutAdvisor(settings)

    http_options = client_cls.call_args.kwargs["http_options"]
    assert http_options.timeout == 12500


def test_advisor_requires_api_key():
    with pytest.raises(ValueError):
        LayoutAdvisor(Settings(google_api_key=""))
    with pytest.raises(ValueError):
        LayoutAdvisor(Settings(google_api_key="your-api-key-here"))


def test_suggest_layout_parses_answer(full_furniture):
    advisor, client = make_advisor()
    client.models.generate_content.return_value = answer(VALID_ANSWER)

    suggestion = asyncio.run(advisor.suggest_layout(ROOM, full_furniture))

    assert len(suggestion.suggested_furniture) == 2
    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-2.5-flash"
    assert "ROOM SPECIFICATIONS" in kwargs["contents"][0]


def test_suggest_layout_retries_with_simplified_prompt(full_furniture):
    advisor, client = make_advisor()
    client.models.generate_content.side_effect = [answer("no json here"), answer(VALID_ANSWER)]

    suggestion = asyncio.run(advisor.suggest_layout(ROOM, full_furniture))

    assert len(suggestion.suggested_furniture) == 2
    assert client.models.generate_content.call_count == 2
    retry_prompt = client.models.generate_content.call_args.kwargs["contents"][0]
    assert retry_prompt.startswith("Create a furniture layout")


def test_suggest_layout_gives_up_after_two_bad_answers(full_furniture):
    advisor, client = make_advisor()
    client.models.generate_content.return_value = answer("still no json")

    suggestion = asyncio.run(advisor.suggest_layout(ROOM, full_furniture))

    assert suggestion.is_empty
    assert client.models.generate_content.call_count == 2


def test_suggest_layout_returns_empty_on_api_error(full_furniture):
    advisor, client = make_advisor()
    client.models.generate_content.side_effect = RuntimeError("503 Service Unavailable")

    suggestion = asyncio.run(advisor.suggest_layout(ROOM, full_furniture))

    assert suggestion.is_empty
    assert client.models.generate_content.call_count == 1


def test_suggest_layout_returns_empty_on_timeout(full_furniture):
    advisor, client = make_advisor(ai_timeout_seconds=0.05)

    def slow_call(**kwargs):
        time.sleep(0.3)
        return answer(VALID_ANSWER)

    client.models.generate_content.side_effect = slow_call

    suggestion = asyncio.run(advisor.suggest_layout(ROOM, full_furniture))

    assert suggestion.is_empty


def test_connection_check():
    advisor, client = make_advisor()
    client.models.generate_content.return_value = answer("OK")
    assert asyncio.run(advisor.test_connection()) is True

    client.models.generate_content.side_effect = RuntimeError("unauthorized")
    assert asyncio.run(advisor.test_connection()) is False
