from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import Field

from officedocs.documents.base import Document, Echo

_PAGE_RATE = 2.5
_LABOR_SURCHARGE = 50.0
_COMMERCIAL_VALUE_RATE = 0.001


class Contract(Document):
    kind: Literal["contract"] = Field(default="contract", frozen=True)
    contract_type: str = Field(frozen=True)  # e.g. "labor", "civil", "commercial"
    valid_until: date = Field(frozen=True)
    contract_value: float = Field(frozen=True)

    def compute_cost(self) -> float:
        """Per-page rate plus a surcharge that depends on the contract type.

        Labor contracts carry a flat fee; commercial contracts pay a share
        of the contract value. Other types pay the page rate only.
        """
        base_cost = self.page_count * _PAGE_RATE
        if self.contract_type == "labor":
            return base_cost + _LABOR_SURCHARGE
        if self.contract_type == "commercial":
            return base_cost + self.contract_value * _COMMERCIAL_VALUE_RATE
        return base_cost

    def format(self) -> str:
        return "Legal A4 format, duplex printing"

    def describe_content(self, echo: Echo = print) -> None:
        super().describe_content(echo)
        echo("Adding the legal frame and standard contract clauses")

    def type_label(self) -> str:
        return f"Contract ({self.contract_type})"

    def is_archivable(self) -> bool:
        return self.valid_until > date.today()

    def is_expired(self) -> bool:
        return date.today() > self.valid_until
