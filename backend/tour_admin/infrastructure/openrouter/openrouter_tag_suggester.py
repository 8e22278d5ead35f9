"""OpenRouter tag suggester: concrete implementation of the TagSuggester port.

Asks the LLM for short tag names describing a location. The caller decides
which of the names map onto existing tags.
"""

import json
import logging
import re

from tour_admin.application.interfaces import TagSuggester
from tour_admin.domain.entities import ChatMessage
from tour_admin.domain.exceptions import ChatProviderError
from tour_admin.infrastructure.openrouter.openrouter_client import OpenRouterClient

logger = logging.getLogger(__name__)

_MAX_SUGGESTIONS = 8

_TAG_SYSTEM_PROMPT = """You tag places for a travel guide platform. Given a description of a location, propose short tags (1-3 words each) that a traveller would filter by.

IMPORTANT RULES:
1. Return ONLY valid JSON with this exact shape: {"tags": ["tag one", "tag two"]}
2. Prefer tags from the provided list of existing tags when they fit
3. Propose at most 8 tags
4. Do not include the city name or the location name as a tag

Example response:
{"tags": ["coffee", "brunch", "work friendly"]}"""


class OpenRouterTagSuggester(TagSuggester):
    """Tag suggester backed by an OpenRouter chat model."""

    def __init__(self, openrouter_client: OpenRouterClient, model: str):
        self._client = openrouter_client
        self._model = model

    async def suggest(self, text: str, available_names: list[str]) -> list[str]:
        existing = ", ".join(available_names) if available_names else "(none)"
        messages = [
            ChatMessage(role="system", content=_TAG_SYSTEM_PROMPT),
            ChatMessage(
                role="user",
                content=f"Existing tags: {existing}\n\nLocation description:\n{text}",
            ),
        ]

        result = await self._client.complete(
            messages, self._model, temperature=0.2, max_tokens=300, json_mode=True
        )
        logger.info(
            "Tag suggestion completed (model=%s, tokens=%d)",
            result.model,
            result.usage.total_tokens,
        )
        return self._parse_tags(result.content)

    def _parse_tags(self, content: str) -> list[str]:
        try:
            data = json.loads(self._extract_json(content))
        except json.JSONDecodeError as exc:
            raise ChatProviderError(
                provider="openrouter",
                status_code=502,
                message=f"Tag suggestions were not valid JSON: {exc.msg}",
            ) from exc

        raw = data.get("tags", []) if isinstance(data, dict) else data
        names: list[str] = []
        seen: set[str] = set()
        for item in raw if isinstance(raw, list) else []:
            name = str(item).strip()
            if name and name.casefold() not in seen:
                seen.add(name.casefold())
                names.append(name)
        return names[:_MAX_SUGGESTIONS]

    @staticmethod
    def _extract_json(text: str) -> str:
        """Extract JSON from a response that might be wrapped in markdown code blocks."""
        if "```" in text:
            match = re.search(r"```(?:json)?\s*\n?(.*?)\n?\s*```", text, re.DOTALL)
            if match:
                return match.group(1).strip()
        return text.strip()
