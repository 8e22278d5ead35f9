"""Chat completion values exchanged with the tag-suggestion model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "system" | "user" | "assistant"
    content: str = ""


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    cost: float | None = None  # USD, when the provider reports it


@dataclass(frozen=True)
class ChatCompletionResult:
    """First choice of a completion, flattened."""

    model: str
    content: str
    finish_reason: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    provider: str = ""
