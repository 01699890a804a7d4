"""AI coach replies via Google Gemini.

The coach never raises to its caller: a missing key, a provider error or an
empty reply each map to a fixed user-facing fallback string.
"""

from __future__ import annotations

import logging

from google import genai

from ironlog.core.config import Settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are IronBot, an elite bodybuilding coach with the knowledge of legends like Arnold, "
    "scientific approach of Jeff Nippard, and intensity of CBUM.\n"
    "Your goal is to help the user with workout advice, form tips (text-based), split recommendations, "
    "and recovery science.\n"
    "Keep answers concise, direct, and motivating. No fluff. Use bodybuilding terminology correctly "
    "(e.g., hypertrophy, progressive overload, RPE, volume, frequency)."
)

MISSING_KEY_REPLY = "AI Configuration Error: API Key missing."
EMPTY_REPLY = "Train harder, I couldn't process that."
CONNECTION_REPLY = "I'm having trouble connecting to the neural link. Check your connection."
NO_CONTEXT = "No active workout context."


def build_prompt(message: str, context: str | None) -> str:
    return f"{context or NO_CONTEXT}\n\nUser question: {message}"


class GeminiCoach:
    """send(message, context) -> reply text."""

    def __init__(self, api_key: str, model: str, temperature: float = 0.7, client: genai.Client | None = None):
        self.model = model
        self.temperature = temperature
        self._client = client
        if self._client is None and api_key:
            self._client = genai.Client(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiCoach":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.coach_model,
            temperature=settings.coach_temperature,
        )

    async def send(self, message: str, context: str | None = None) -> str:
        if self._client is None:
            logger.warning("GEMINI_API_KEY is missing; coach replies are disabled")
            return MISSING_KEY_REPLY
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=build_prompt(message, context),
                config=genai.types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    temperature=self.temperature,
                ),
            )
        except Exception:
            logger.exception("Gemini request failed")
            return CONNECTION_REPLY

        text = (response.text or "").strip() if response is not None else ""
        if not text:
            logger.error("Gemini returned an empty response")
            return EMPTY_REPLY
        return text
