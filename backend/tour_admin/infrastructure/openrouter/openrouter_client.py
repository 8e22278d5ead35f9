"""OpenRouter chat client used for short, JSON-shaped completions."""

import logging

import httpx

from tour_admin.domain.entities import ChatCompletionResult, ChatMessage, TokenUsage
from tour_admin.domain.exceptions import ChatProviderError

logger = logging.getLogger(__name__)

_PROVIDER = "openrouter"


class OpenRouterClient:
    """Infrastructure adapter for the OpenRouter ``/chat/completions`` endpoint.

    Keeps one pooled httpx.AsyncClient for the life of the console. An
    injected client (tests use httpx.MockTransport) is never closed here.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        app_name: str = "Tour Admin Console",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not api_key:
            raise ValueError("OpenRouter API key is required")
        self._api_key = api_key
        self._endpoint = f"{base_url.rstrip('/')}/chat/completions"
        self._app_name = app_name
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def provider_name(self) -> str:
        return _PROVIDER

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> ChatCompletionResult:
        """One non-streaming completion; ``json_mode`` asks for a JSON object reply."""
        body: dict = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if temperature is not None:
            body["temperature"] = temperature
        if max_tokens is not None:
            body["max_tokens"] = max_tokens
        if json_mode:
            body["response_format"] = {"type": "json_object"}

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "X-Title": self._app_name,
        }
        try:
            response = await self._http_client.post(self._endpoint, headers=headers, json=body)
        except httpx.HTTPError as exc:
            logger.warning("OpenRouter unreachable: %s", exc)
            raise ChatProviderError(_PROVIDER, 503, str(exc)) from exc

        if response.status_code != 200:
            raise _error_from_response(response)
        return _to_result(response.json())

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()


def _error_from_response(response: httpx.Response) -> ChatProviderError:
    try:
        message = response.json().get("error", {}).get("message") or response.text
    except ValueError:
        message = response.text
    logger.info("OpenRouter answered %d: %s", response.status_code, message)
    return ChatProviderError(_PROVIDER, response.status_code, message)


def _to_result(data: dict) -> ChatCompletionResult:
    # OpenRouter can report upstream failures inside a 200 body
    if "error" in data:
        error = data["error"] or {}
        raise ChatProviderError(
            _PROVIDER, error.get("code", 500), error.get("message", "Unknown error")
        )
    if not data.get("choices"):
        raise ChatProviderError(_PROVIDER, 502, "Completion had no choices")

    choice = data["choices"][0]
    usage = data.get("usage") or {}
    return ChatCompletionResult(
        model=data.get("model", ""),
        content=(choice.get("message") or {}).get("content") or "",
        finish_reason=choice.get("finish_reason") or "stop",
        usage=TokenUsage(
            prompt_tokens=usage.get("prompt_tokens", 0),
            completion_tokens=usage.get("completion_tokens", 0),
            total_tokens=usage.get("total_tokens", 0),
            cost=usage.get("cost"),
        ),
        provider=_PROVIDER,
    )
