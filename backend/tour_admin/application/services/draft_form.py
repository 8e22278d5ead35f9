"""Draft form: the create/edit modal of a list page, minus the markup.

The form owns a Draft (raw field values), validates it synchronously and
hands the coerced payload to a caller-supplied async ``on_save``. It closes
only when ``on_save`` succeeds or the user cancels.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import ValidationError

from tour_admin.application.interfaces import TagSuggester
from tour_admin.application.schemas.drafts import DraftModel, is_blank
from tour_admin.domain.entities import Record, Tag, find_tag_by_name
from tour_admin.domain.exceptions import (
    ActionInProgressError,
    BlockedActionError,
    ChatProviderError,
    DraftValidationError,
)
from tour_admin.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

logger = logging.getLogger(__name__)
wlog = WorkflowLogger("DraftForm")

OnSave = Callable[[dict[str, Any]], Awaitable[Any]]

# Free-text fields a tag suggestion can be based on.
SUGGESTION_SOURCE_FIELDS = ("description", "recommendations")


def _describe_validation_error(exc: ValidationError) -> DraftValidationError:
    fields: list[str] = []
    parts: list[str] = []
    for error in exc.errors():
        name = ".".join(str(loc) for loc in error.get("loc", ())) or "draft"
        fields.append(name)
        parts.append(f"{name}: {error.get('msg', 'invalid value')}")
    return DraftValidationError("Invalid value for " + "; ".join(parts), fields=fields)


class DraftForm:
    """Edits one draft of ``schema`` and submits it through ``on_save``."""

    def __init__(
        self,
        schema: type[DraftModel],
        on_save: OnSave,
        *,
        record: Record | None = None,
        available_tags: list[Tag] | None = None,
        tag_suggester: TagSuggester | None = None,
        submit_label: str = "Save",
        busy_label: str = "Saving...",
    ):
        self._schema = schema
        self._on_save = on_save
        self.record = record
        self.available_tags: list[Tag] = list(available_tags or [])
        self._tag_suggester = tag_suggester
        self._submit_label = submit_label
        self._busy_label = busy_label

        if record is None:
            self.values: dict[str, Any] = schema.blank_values()
        else:
            self.values = schema.values_from_record(record)

        self.is_open = True
        self.is_submitting = False
        self.is_suggesting = False
        self.error: str | None = None
        self.failure: Exception | None = None
        self.result: Any = None
        self.suggested_names: list[str] = []

    # ── Presentation state ─────────────────────────────────────────

    @property
    def is_edit(self) -> bool:
        return self.record is not None

    @property
    def title(self) -> str:
        noun = self._schema.__name__.removesuffix("Draft")
        return f"{'Edit' if self.is_edit else 'Create'} {noun}"

    @property
    def submit_label(self) -> str:
        return self._busy_label if self.is_submitting else self._submit_label

    @property
    def can_submit(self) -> bool:
        return self.is_open and not self.is_submitting

    # ── Field editing ──────────────────────────────────────────────

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown field '{name}' for {self._schema.__name__}")
        self.values[name] = value

    def update(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    # ── Tags ───────────────────────────────────────────────────────

    @property
    def tag_ids(self) -> list[str]:
        if "tag_ids" not in self.values:
            raise KeyError(f"{self._schema.__name__} has no tags")
        if self.values["tag_ids"] is None:
            self.values["tag_ids"] = []
        return self.values["tag_ids"]

    @property
    def selected_tags(self) -> list[Tag]:
        by_id = {tag.id: tag for tag in self.available_tags}
        return [by_id[tag_id] for tag_id in self.tag_ids if tag_id in by_id]

    @property
    def addable_tags(self) -> list[Tag]:
        """Tags offered in the dropdown: everything not selected yet."""
        chosen = set(self.tag_ids)
        return [tag for tag in self.available_tags if tag.id not in chosen]

    def add_tag(self, tag_id: str) -> bool:
        """Append a tag id unless it is already present. Returns True if added."""
        tag_id = str(tag_id)
        ids = self.tag_ids
        if not tag_id or tag_id in ids:
            return False
        ids.append(tag_id)
        return True

    def remove_tag(self, tag_id: str) -> bool:
        tag_id = str(tag_id)
        ids = self.tag_ids
        if tag_id not in ids:
            return False
        self.values["tag_ids"] = [existing for existing in ids if existing != tag_id]
        return True

    @property
    def can_suggest_tags(self) -> bool:
        return self._tag_suggester is not None and any(
            not is_blank(self.values.get(name)) for name in SUGGESTION_SOURCE_FIELDS
        )

    @property
    def addable_suggestions(self) -> list[Tag]:
        """Suggested names that match an existing tag (case-insensitive) not yet chosen."""
        chosen = set(self.tag_ids)
        offered: list[Tag] = []
        for name in self.suggested_names:
            tag = find_tag_by_name(self.available_tags, name)
            if tag is not None and tag.id not in chosen and tag not in offered:
                offered.append(tag)
        return offered

    async def suggest_tags(self) -> list[Tag]:
        """Ask the suggester for tag names and return the ones that can be added."""
        if not self.can_suggest_tags:
            raise BlockedActionError(
                "suggest_tags", "Add a description or recommendations to get tag suggestions"
            )
        if self.is_suggesting:
            raise ActionInProgressError("suggest_tags")

        text = "\n\n".join(
            str(self.values[name]).strip()
            for name in SUGGESTION_SOURCE_FIELDS
            if not is_blank(self.values.get(name))
        )
        self.is_suggesting = True
        self.error = None
        try:
            async with wlog.timed_step(WorkflowStage.SUGGEST, "Suggesting tags", chars=len(text)):
                self.suggested_names = await self._tag_suggester.suggest(
                    text, [tag.name for tag in self.available_tags]
                )
        except ChatProviderError as exc:
            self.error = f"Could not suggest tags: {exc.message}"
            self.suggested_names = []
        finally:
            self.is_suggesting = False
        return self.addable_suggestions

    def add_suggested_tag(self, name: str) -> bool:
        tag = find_tag_by_name(self.available_tags, name)
        if tag is None:
            return False
        return self.add_tag(tag.id)

    # ── Lifecycle ──────────────────────────────────────────────────

    def validate(self) -> DraftModel:
        """Required-field check, then coercion into the draft model."""
        missing = [
            name for name in self._schema.required_fields if is_blank(self.values.get(name))
        ]
        if missing:
            raise DraftValidationError(self._schema.required_message, fields=missing)
        try:
            return self._schema.model_validate(self.values)
        except ValidationError as exc:
            raise _describe_validation_error(exc) from exc

    async def submit(self) -> bool:
        """Validate and save. Returns True when saved (the form is then closed)."""
        if self.is_submitting:
            raise ActionInProgressError("submit")
        if not self.is_open:
            return False

        self.error = None
        self.failure = None
        try:
            draft = self.validate()
        except DraftValidationError as exc:
            self.failure = exc
            self.error = exc.message
            return False

        self.is_submitting = True
        try:
            self.result = await self._on_save(draft.to_payload())
        except Exception as exc:
            # any save failure is shown inline and the form stays open
            self.failure = exc
            self.error = getattr(exc, "message", None) or str(exc) or type(exc).__name__
            logger.info("%s save failed: %s", self._schema.__name__, self.error)
            return False
        finally:
            self.is_submitting = False

        self.is_open = False
        return True

    def cancel(self) -> None:
        self.is_open = False
