from __future__ import annotations

import calendar
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from officedocs.config import settings

logger = logging.getLogger(__name__)

# Receives one line of narration (print, a list's append, a logger method...)
Echo = Callable[[str], None]


def get_document_standard() -> str:
    """Return the quality standard every document is produced under."""
    return settings.document_standard


def shift_months(day: date, months: int) -> date:
    """Move `day` by a number of calendar months (negative goes back).

    The day of month is clamped to the length of the target month,
    e.g. 2026-08-31 shifted by -6 gives 2026-02-28.
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month_zero = divmod(month_index, 12)
    month = month_zero + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class DocumentOperations(ABC):
    """Capability set shared by every document kind.

    Callers work against these methods without knowing the concrete kind.
    `type_label()` and `is_archivable()` have defaults that kinds may override.
    """

    @abstractmethod
    def compute_cost(self) -> float:
        """Printing cost of the document."""
        ...

    @abstractmethod
    def format(self) -> str:
        """Human-readable print format description."""
        ...

    @abstractmethod
    def describe_content(self, echo: Echo = print) -> None:
        """Narrate how the document's content is generated."""
        ...

    def type_label(self) -> str:
        return "General document"

    def is_archivable(self) -> bool:
        return True


class Document(BaseModel, DocumentOperations):
    """Fields common to every document kind.

    Everything except `page_count` is frozen once the document exists.
    `creation_date` defaults to the day of construction; restored records
    may pass it explicitly.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(frozen=True)
    author: str = Field(frozen=True)
    document_id: str = Field(frozen=True)
    page_count: int = 1
    creation_date: date = Field(default_factory=date.today, frozen=True)

    def document_info(self) -> str:
        return (
            f"ID: {self.document_id} | Title: {self.title} | Author: {self.author} "
            f"| Date: {self.creation_date.isoformat()} | Pages: {self.page_count}"
        )

    def describe_content(self, echo: Echo = print) -> None:
        logger.debug("describe_content", extra={"document_id": self.document_id})
        echo(f"Generating content for document: {self.title}")

    def archive(self, echo: Echo = print) -> None:
        """Narrate archiving. Does not consult `is_archivable()`."""
        logger.debug("archive", extra={"document_id": self.document_id})
        echo(f"Archiving document: {self.title}")
