from __future__ import annotations

import logging
from datetime import date
from typing import Literal

from pydantic import Field

from officedocs.config import settings
from officedocs.documents.base import Document, Echo, shift_months

logger = logging.getLogger(__name__)

_SLIDE_RATE = 3.0
_ANIMATIONS_SURCHARGE = 25.0


class Presentation(Document):
    kind: Literal["presentation"] = Field(default="presentation", frozen=True)
    presentation_theme: str = Field(frozen=True)
    slide_count: int = Field(frozen=True)
    has_animations: bool = Field(frozen=True)

    def compute_cost(self) -> float:
        cost = self.slide_count * _SLIDE_RATE
        if self.has_animations:
            cost += _ANIMATIONS_SURCHARGE  # transition formatting
        return cost

    def format(self) -> str:
        return "Presentation format 16:9, color printing"

    def describe_content(self, echo: Echo = print) -> None:
        super().describe_content(echo)
        echo(f"Building slide structure for theme: {self.presentation_theme}")
        echo(f"Slide count: {self.slide_count}")
        if self.has_animations:
            echo("Adding animations and transitions")

    def is_archivable(self) -> bool:
        """Presentations go stale: only recent ones are worth archiving."""
        cutoff = shift_months(date.today(), -settings.presentation_archive_months)
        return self.creation_date > cutoff

    def start_slide_show(self, echo: Echo = print) -> None:
        logger.debug("start_slide_show", extra={"document_id": self.document_id})
        echo(f"Starting slide show: {self.title}")
        echo(f"Theme: {self.presentation_theme}")
        echo(f"Slide count: {self.slide_count}")
