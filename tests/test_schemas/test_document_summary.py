from __future__ import annotations

from datetime import date, timedelta

import pytest

from officedocs.documents.factory import (
    create_document,
    create_simple_contract,
    create_simple_report,
)
from officedocs.schemas.document import DocumentSummary, summarize, total_printing_cost


def test_summary_from_contract() -> None:
    doc = create_document(
        "contract",
        {
            "title": "Old lease",
            "contractType": "commercial",
            "validUntil": date.today() - timedelta(days=1),
        },
    )
    summary = DocumentSummary.from_document(doc)
    assert summary.document_id == doc.document_id
    assert summary.kind == "contract"
    assert summary.type_label == "Contract (commercial)"
    assert summary.format == "Legal A4 format, duplex printing"
    assert summary.printing_cost == pytest.approx(2.5)
    assert summary.archivable is False
    assert summary.info == doc.document_info()


def test_summarize_keeps_order() -> None:
    docs = [create_document("presentation"), create_document("report")]
    summaries = summarize(docs)
    assert [s.kind for s in summaries] == ["presentation", "report"]
    assert summaries[0].type_label == "General document"


def test_summary_serializes() -> None:
    summary = DocumentSummary.from_document(create_document("report", {"pageCount": 2}))
    data = summary.model_dump(mode="json")
    assert data["creation_date"] == date.today().isoformat()
    assert data["page_count"] == 2


def test_total_printing_cost_of_mixed_collection() -> None:
    docs = [
        create_simple_contract("Contract", "Author"),
        create_simple_report("Report", "Author", "department"),
    ]
    # 1 page * 2.5 for the civil contract, 1 page * 1.8 + 30 charts for the report
    assert total_printing_cost(docs) == pytest.approx(34.3)


def test_total_printing_cost_of_empty_collection() -> None:
    assert total_printing_cost([]) == 0.0
