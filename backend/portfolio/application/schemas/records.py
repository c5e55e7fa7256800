"""Open record base for request bodies that are stored as submitted."""

from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator


class OpenRecord(BaseModel):
    """Request body with documented fields and pass-through for everything else.

    Documented fields are optional and untyped: bodies are trusted as-is and
    stored verbatim, the declared fields only describe what the frontend sends.
    """

    model_config = ConfigDict(extra="allow")

    _submitted_keys: list[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler):
        record = handler(data)
        if isinstance(data, dict):
            record._submitted_keys = list(data)
        return record

    def to_record(self) -> dict[str, Any]:
        """Return exactly the fields present in the submitted body, in body order."""
        values = self.model_dump()
        keys = self._submitted_keys or [
            *self.model_fields_set,
            *(self.model_extra or {}),
        ]
        return {key: values[key] for key in keys if key in values}
