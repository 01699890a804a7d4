"""Gemini coach wrapper with the provider client faked out."""

import asyncio
from types import SimpleNamespace

from ironlog.services.coach import (
    CONNECTION_REPLY,
    EMPTY_REPLY,
    MISSING_KEY_REPLY,
    SYSTEM_PROMPT,
    GeminiCoach,
    build_prompt,
)


class _Models:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def _client(models):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


class TestGeminiCoach:
    def test_missing_key(self):
        coach = GeminiCoach(api_key="", model="gemini-2.5-flash")
        assert asyncio.run(coach.send("How do I squat?")) == MISSING_KEY_REPLY

    def test_reply_text_returned(self):
        models = _Models(text="  Brace and sit back.  ")
        coach = GeminiCoach(api_key="", model="gemini-2.5-flash", temperature=0.7, client=_client(models))
        assert asyncio.run(coach.send("How do I squat?", "Last workout was Legs.")) == "Brace and sit back."

        call = models.calls[0]
        assert call["model"] == "gemini-2.5-flash"
        assert call["contents"] == "Last workout was Legs.\n\nUser question: How do I squat?"
        assert call["config"].system_instruction == SYSTEM_PROMPT
        assert call["config"].temperature == 0.7

    def test_empty_reply(self):
        coach = GeminiCoach(api_key="", model="m", client=_client(_Models(text="")))
        assert asyncio.run(coach.send("hi")) == EMPTY_REPLY

    def test_provider_error(self):
        coach = GeminiCoach(api_key="", model="m", client=_client(_Models(error=RuntimeError("503"))))
        assert asyncio.run(coach.send("hi")) == CONNECTION_REPLY

    def test_prompt_without_context(self):
        assert build_prompt("hi", None) == "No active workout context.\n\nUser question: hi"
