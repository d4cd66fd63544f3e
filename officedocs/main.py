from __future__ import annotations

"""Console walkthrough of the document model.

Usage:
    python -m officedocs.main
    officedocs-demo
"""

import logging
from datetime import date

from officedocs.config import settings
from officedocs.documents.base import get_document_standard, shift_months
from officedocs.documents.factory import (
    AnyDocument,
    create_document,
    create_simple_contract,
    create_simple_report,
)
from officedocs.schemas.document import summarize, total_printing_cost

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_sample_documents() -> list[AnyDocument]:
    """One document of each kind, built through the generic factory entry point."""
    return [
        create_document(
            "contract",
            {
                "title": "Employment contract",
                "author": "HR department",
                "contractType": "labor",
                "contractValue": 50000.0,
                "validUntil": shift_months(date.today(), 36),
                "pageCount": 5,
            },
        ),
        create_document(
            "report",
            {
                "title": "Weekly sales report",
                "author": "Sales department",
                "reportPeriod": "weekly",
                "hasCharts": True,
                "department": "sales",
                "pageCount": 8,
            },
        ),
        create_document(
            "presentation",
            {
                "title": "New product launch",
                "author": "Marketing department",
                "theme": "Product launch",
                "slides": 15,
                "hasAnimations": True,
                "pageCount": 15,
            },
        ),
    ]


def _print_specifics(document: AnyDocument) -> None:
    match document.kind:
        case "contract":
            print(f"Contract: {document.title}")
            print(f"  Contract type: {document.contract_type}")
            print(f"  Valid until: {document.valid_until.isoformat()}")
            print(f"  Expired: {document.is_expired()}")
        case "report":
            print(f"Report: {document.title}")
            print(f"  Department: {document.department}")
            print(f"  Period: {document.report_period}")
            document.add_executive_summary()
        case "presentation":
            print(f"Presentation: {document.title}")
            print(f"  Theme: {document.presentation_theme}")
            print(f"  Slides: {document.slide_count}")
            document.start_slide_show()


def run_demo() -> None:
    print("=== DOCUMENT MANAGEMENT SYSTEM ===\n")

    print("1. FACTORY SHORTCUTS:")
    contract = create_simple_contract("Service agreement", "Ivan Petrenko")
    print(f"Created: {contract.document_info()}")
    report = create_simple_report("Q1 financial report", "Maria Sydorenko", "finance")
    print(f"Created: {report.document_info()}")

    documents = build_sample_documents()

    print("\n2. CAPABILITIES PER DOCUMENT:")
    for summary in summarize(documents):
        print(f"- {summary.info}")
        print(f"  Type: {summary.type_label}")
        print(f"  Format: {summary.format}")
        print(f"  Printing cost: {summary.printing_cost:.2f}")
        print(f"  Archivable: {summary.archivable}")
        print()
    print(f"Total printing cost: {total_printing_cost(documents):.2f}\n")

    print("3. CONTENT GENERATION AND ARCHIVING:")
    for document in documents:
        document.describe_content()
        document.archive()
        print()

    print("4. KIND-SPECIFIC OPERATIONS:")
    for document in documents:
        _print_specifics(document)
        print()

    print(f"Document standard: {get_document_standard()}")


def main() -> None:
    _configure_logging()
    logger.info("Starting document demo", extra={"env": settings.app_env})
    run_demo()
    logger.info("Document demo finished")


if __name__ == "__main__":
    main()
