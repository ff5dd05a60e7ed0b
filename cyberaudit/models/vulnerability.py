"""Vulnerability model — a row in the risk-scoring worksheet."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from cyberaudit.catalog import OWASP_TOP_10
from cyberaudit.models.base import Record
from cyberaudit.services import scoring_engine


class Vulnerability(Record):
    """An identified vulnerability rated by likelihood and impact.

    ``risk_score`` is derived: any value supplied for it is discarded and
    replaced with ``likelihood * impact`` during validation.
    """

    id: str
    name: str = OWASP_TOP_10[0]
    likelihood: int = Field(default=3, ge=1, le=5)
    impact: int = Field(default=3, ge=1, le=5)
    risk_score: int = Field(default=9, ge=1, le=25)

    @model_validator(mode="before")
    @classmethod
    def _derive_risk_score(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            data["risk_score"] = scoring_engine.risk_score(data.get("likelihood", 3), data.get("impact", 3))
        return data

    @field_validator("name")
    @classmethod
    def _name_in_catalog(cls, value: str) -> str:
        if value not in OWASP_TOP_10:
            raise ValueError(f"'{value}' is not an OWASP Top 10 category")
        return value

    @property
    def severity(self) -> str:
        return scoring_engine.severity_band(self.risk_score)

    def __repr__(self) -> str:
        return f"<Vulnerability {self.id} score={self.risk_score}>"
