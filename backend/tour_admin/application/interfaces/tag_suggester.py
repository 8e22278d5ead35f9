"""Abstract interface (port) for proposing tag names from free text."""

from abc import ABC, abstractmethod


class TagSuggester(ABC):
    """Port for tag suggestion: implemented in the infrastructure layer."""

    @abstractmethod
    async def suggest(self, text: str, available_names: list[str]) -> list[str]:
        """Return candidate tag names for ``text``.

        ``available_names`` is a hint for the implementation; callers still
        filter the result against the real tag list.
        """
        ...
