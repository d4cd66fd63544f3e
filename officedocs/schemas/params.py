from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from officedocs.config import settings
from officedocs.documents.base import shift_months


def _default_valid_until() -> date:
    return shift_months(date.today(), settings.contract_validity_years * 12)


class DocumentParams(BaseModel):
    """Construction parameters shared by every document kind.

    Accepts the camelCase keys callers pass in a parameter map as well as the
    field names. Keys meant for other kinds are ignored. Values are not range
    checked: negative counts pass through unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = "Untitled"
    author: str = "Unknown author"
    page_count: int = Field(default=1, alias="pageCount")


class ContractParams(DocumentParams):
    contract_type: str = Field(default="civil", alias="contractType")
    valid_until: date = Field(default_factory=_default_valid_until, alias="validUntil")
    contract_value: float = Field(default=0.0, alias="contractValue")


class ReportParams(DocumentParams):
    report_period: str = Field(default="monthly", alias="reportPeriod")
    has_charts: bool = Field(default=False, alias="hasCharts")
    department: str = "general"


class PresentationParams(DocumentParams):
    theme: str = "General theme"
    slides: int = 10
    has_animations: bool = Field(default=False, alias="hasAnimations")
