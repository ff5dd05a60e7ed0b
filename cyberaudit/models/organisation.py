"""Organisation model — the profile of the organisation under audit."""

from __future__ import annotations

from cyberaudit.models.base import Record


class Organisation(Record):
    """The single organisation profile for the workspace."""

    name: str
    industry: str
    size: str
    contact_email: str

    def __repr__(self) -> str:
        return f"<Organisation {self.name}>"
