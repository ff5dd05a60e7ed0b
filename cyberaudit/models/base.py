"""Base record type shared by every workspace entity."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Immutable record. Changes produce a new, fully re-validated instance."""

    model_config = ConfigDict(frozen=True)

    def revise(self, **changes: Any) -> "Record":
        """Return a copy with ``changes`` applied.

        Unlike ``model_copy(update=...)`` this runs validation again, so
        derived fields are recomputed from the new inputs.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
