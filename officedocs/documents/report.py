from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field

from officedocs.documents.base import Document, Echo

logger = logging.getLogger(__name__)

_PAGE_RATE = 1.8
_CHARTS_SURCHARGE = 30.0
_COLOR_MULTIPLIER = 1.5
# Departments whose reports are printed in color
_COLOR_DEPARTMENTS = frozenset({"marketing", "design"})


class Report(Document):
    kind: Literal["report"] = Field(default="report", frozen=True)
    report_period: str = Field(frozen=True)  # e.g. "daily", "weekly", "monthly"
    has_charts: bool = Field(frozen=True)
    department: str = Field(frozen=True)

    def compute_cost(self) -> float:
        """Per-page rate, plus charts, then the color multiplier on the total."""
        cost = self.page_count * _PAGE_RATE
        if self.has_charts:
            cost += _CHARTS_SURCHARGE
        if self.department in _COLOR_DEPARTMENTS:
            cost *= _COLOR_MULTIPLIER
        return cost

    def format(self) -> str:
        return "Corporate format with company logo"

    def describe_content(self, echo: Echo = print) -> None:
        super().describe_content(echo)
        echo("Adding tables, charts and analytical conclusions")
        if self.has_charts:
            echo(f"Generating charts for period: {self.report_period}")

    def type_label(self) -> str:
        return f"Report ({self.report_period}) from {self.department}"

    def add_executive_summary(self, echo: Echo = print) -> None:
        logger.debug("add_executive_summary", extra={"document_id": self.document_id})
        echo(f"Adding executive summary to report: {self.title}")
