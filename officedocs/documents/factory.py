from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, cast

from pydantic import BaseModel

from officedocs.documents.contract import Contract
from officedocs.documents.presentation import Presentation
from officedocs.documents.report import Report
from officedocs.schemas.params import (
    ContractParams,
    DocumentParams,
    PresentationParams,
    ReportParams,
)

logger = logging.getLogger(__name__)

# Closed set of kinds; match on `doc.kind` to reach kind-specific methods
AnyDocument = Contract | Report | Presentation


class DocumentType(str, Enum):
    CONTRACT = "contract"
    REPORT = "report"
    PRESENTATION = "presentation"

    @property
    def prefix(self) -> str:
        return _ID_PREFIXES[self]


_ID_PREFIXES: dict[DocumentType, str] = {
    DocumentType.CONTRACT: "CONT",
    DocumentType.REPORT: "REP",
    DocumentType.PRESENTATION: "PRES",
}


class UnrecognizedDocumentTypeError(ValueError):
    """Raised when a type tag names none of the known document kinds."""

    def __init__(self, doc_type: str) -> None:
        super().__init__(f"Unrecognized document type: {doc_type!r}")
        self.doc_type = doc_type


def parse_document_type(doc_type: str | DocumentType) -> DocumentType:
    """Resolve a case-insensitive type tag. Raises UnrecognizedDocumentTypeError."""
    if isinstance(doc_type, DocumentType):
        return doc_type
    try:
        return DocumentType(doc_type.lower())
    except ValueError:
        raise UnrecognizedDocumentTypeError(doc_type) from None


def generate_document_id(doc_type: str | DocumentType) -> str:
    """Return '<PREFIX>-<8 uppercase hex>', e.g. 'CONT-1A2B3C4D'."""
    kind = parse_document_type(doc_type)
    return f"{kind.prefix}-{uuid.uuid4().hex[:8].upper()}"


def _build_contract(params: ContractParams, document_id: str) -> Contract:
    return Contract(
        title=params.title,
        author=params.author,
        document_id=document_id,
        page_count=params.page_count,
        contract_type=params.contract_type,
        valid_until=params.valid_until,
        contract_value=params.contract_value,
    )


def _build_report(params: ReportParams, document_id: str) -> Report:
    return Report(
        title=params.title,
        author=params.author,
        document_id=document_id,
        page_count=params.page_count,
        report_period=params.report_period,
        has_charts=params.has_charts,
        department=params.department,
    )


def _build_presentation(params: PresentationParams, document_id: str) -> Presentation:
    return Presentation(
        title=params.title,
        author=params.author,
        document_id=document_id,
        page_count=params.page_count,
        presentation_theme=params.theme,
        slide_count=params.slides,
        has_animations=params.has_animations,
    )


_PARAMS_MODELS: dict[DocumentType, type[DocumentParams]] = {
    DocumentType.CONTRACT: ContractParams,
    DocumentType.REPORT: ReportParams,
    DocumentType.PRESENTATION: PresentationParams,
}

_BUILDERS: dict[DocumentType, Callable[[Any, str], AnyDocument]] = {
    DocumentType.CONTRACT: _build_contract,
    DocumentType.REPORT: _build_report,
    DocumentType.PRESENTATION: _build_presentation,
}


def create_document(
    doc_type: str | DocumentType,
    params: Mapping[str, Any] | DocumentParams | None = None,
) -> AnyDocument:
    """Build a document of the given kind from a loose parameter map.

    `params` may use the camelCase keys ("pageCount", "validUntil", "slides", ...)
    or the field names; anything missing takes its documented default.
    Raises UnrecognizedDocumentTypeError for unknown tags and
    pydantic.ValidationError for values of the wrong type.
    """
    kind = parse_document_type(doc_type)
    if isinstance(params, BaseModel):
        raw: dict[str, Any] = params.model_dump()
    else:
        raw = dict(params or {})
    parsed = _PARAMS_MODELS[kind].model_validate(raw)

    document = _BUILDERS[kind](parsed, generate_document_id(kind))
    logger.info(
        "Created %s document %s",
        kind.value,
        document.document_id,
        extra={"document_id": document.document_id, "kind": kind.value},
    )
    return document


def create_simple_contract(title: str, author: str) -> Contract:
    """Civil contract worth 1000 with every other field defaulted."""
    params = {
        "title": title,
        "author": author,
        "contractType": "civil",
        "contractValue": 1000.0,
    }
    return cast(Contract, create_document(DocumentType.CONTRACT, params))


def create_simple_report(title: str, author: str, department: str) -> Report:
    """Report with charts for the given department."""
    params = {
        "title": title,
        "author": author,
        "department": department,
        "hasCharts": True,
    }
    return cast(Report, create_document(DocumentType.REPORT, params))
