from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Literal

from pydantic import BaseModel

from officedocs.documents.factory import AnyDocument


class DocumentSummary(BaseModel):
    document_id: str
    kind: Literal["contract", "report", "presentation"]
    title: str
    author: str
    creation_date: date
    page_count: int
    info: str
    type_label: str
    format: str
    printing_cost: float
    archivable: bool

    @classmethod
    def from_document(cls, document: AnyDocument) -> DocumentSummary:
        """Snapshot the capability-set results for one document."""
        return cls(
            document_id=document.document_id,
            kind=document.kind,
            title=document.title,
            author=document.author,
            creation_date=document.creation_date,
            page_count=document.page_count,
            info=document.document_info(),
            type_label=document.type_label(),
            format=document.format(),
            printing_cost=document.compute_cost(),
            archivable=document.is_archivable(),
        )


def summarize(documents: Iterable[AnyDocument]) -> list[DocumentSummary]:
    return [DocumentSummary.from_document(doc) for doc in documents]


def total_printing_cost(documents: Iterable[AnyDocument]) -> float:
    return sum((doc.compute_cost() for doc in documents), 0.0)
