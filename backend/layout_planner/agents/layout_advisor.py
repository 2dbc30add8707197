"""
Layout Advisor

Asks Gemini for an alternative furniture layout. Traced with LangSmith.

The advisor is a collaborator of the deterministic engine, never part of
it: every failure (timeout, transport error, unusable output) degrades to
an empty suggestion so callers can fall back to the rule-based layout.
"""

import asyncio
import functools
import logging
from typing import Optional, Sequence

from google import genai
from google.genai import types
from langsmith import traceable

from layout_planner.agents.prompts import build_layout_prompt, build_simplified_prompt
from layout_planner.agents.response_parser import parse_ai_response
from layout_planner.config import Settings, get_settings
from layout_planner.models.ai import AILayoutSuggestion
from layout_planner.models.room import FurnitureItem, RoomSpec


logger = logging.getLogger(__name__)

CONNECTION_TEST_TIMEOUT = 10.0


class LayoutAdvisor:
    """
    Gemini-backed furniture layout advisor.
    All calls are traced with LangSmith.
    """

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        if not settings.ai_configured:
            raise ValueError("GOOGLE_API_KEY environment variable is not set")
        # wait_for only stops waiting; the HTTP timeout ends the worker thread
        self.client = genai.Client(
            api_key=settings.google_api_key,
            http_options=types.HttpOptions(timeout=int(settings.ai_timeout_seconds * 1000))
        )
        self.model = settings.model_name
        self.timeout = settings.ai_timeout_seconds
        self.temperature = settings.ai_temperature
        self.max_output_tokens = settings.ai_max_output_tokens
        logger.info("LayoutAdvisor initialized with model: %s", self.model)

    @traceable(name="layout_advisor.suggest_layout", run_type="chain", tags=["layout", "gemini"])
    async def suggest_layout(
        self,
        room: RoomSpec,
        furniture: Sequence[FurnitureItem]
    ) -> AILayoutSuggestion:
        """
        Generate a furniture layout suggestion.

        The full prompt is tried first; if its answer cannot be parsed, one
        retry is made with the simplified prompt. Transport failures and
        timeouts end the attempt immediately.

        Returns:
            The parsed suggestion, or an empty one on any failure
        """
        logger.info(
            "Requesting AI layout suggestion for %sm x %sm room with $%s budget",
            room.length, room.width, room.budget
        )
        prompts = (
            build_layout_prompt(room, furniture),
            build_simplified_prompt(room, furniture),
        )

        for attempt, prompt in enumerate(prompts, start=1):
            try:
                response_text = await self._call_gemini(prompt)
            except Exception as e:
                logger.error("AI API call failed: %s", e)
                break

            try:
                suggestion = parse_ai_response(response_text, room)
            except ValueError as e:
                logger.warning("Unusable AI response on attempt %d: %s", attempt, e)
                continue

            logger.info(
                "AI suggested %d furniture pieces", len(suggestion.suggested_furniture)
            )
            return suggestion

        logger.info("Returning empty AI suggestion, will fall back to rule-based generation")
        return AILayoutSuggestion()

    @traceable(
        name="gemini_layout_call",
        run_type="llm",
        tags=["gemini", "layout", "api-call"],
        metadata={"task": "layout_suggestion"}
    )
    async def _call_gemini(
        self,
        prompt: str,
        json_output: bool = True,
        max_output_tokens: Optional[int] = None,
        timeout: Optional[float] = None
    ) -> str:
        """
        Make the Gemini API call off the event loop, bounded by a timeout.
        """
        config = types.GenerateContentConfig(
            response_mime_type="application/json" if json_output else "text/plain",
            temperature=self.temperature,
            top_p=0.9,
            max_output_tokens=max_output_tokens or self.max_output_tokens,
        )

        response = await asyncio.wait_for(
            asyncio.to_thread(
                self.client.models.generate_content,
                model=self.model,
                contents=[prompt],
                config=config
            ),
            timeout=timeout or self.timeout
        )

        if not response.text:
            raise RuntimeError("No text in Gemini response")
        return response.text

    async def test_connection(self) -> bool:
        """Send a tiny request; True if Gemini answered."""
        try:
            await self._call_gemini(
                "Test connection. Reply with 'OK'.",
                json_output=False,
                max_output_tokens=10,
                timeout=CONNECTION_TEST_TIMEOUT
            )
        except Exception as e:
            logger.error("AI service connection test failed: %s", e)
            return False
        logger.info("AI service connection test successful")
        return True


@functools.lru_cache()
def get_layout_advisor() -> LayoutAdvisor:
    """
    Get a singleton instance of LayoutAdvisor.
    Cached to avoid re-initializing the Gemini client on every request.
    """
    return LayoutAdvisor()


def get_optional_advisor() -> Optional[LayoutAdvisor]:
    """The advisor when an API key is configured, otherwise None."""
    if not get_settings().ai_configured:
        logger.warning(
            "AI service not configured. Set GOOGLE_API_KEY to enable layout suggestions."
        )
        return None
    return get_layout_advisor()
