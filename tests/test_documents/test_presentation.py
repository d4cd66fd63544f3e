from __future__ import annotations

from datetime import date, timedelta

import pytest

from officedocs.documents.base import shift_months
from officedocs.documents.presentation import Presentation


def _make_presentation(
    slide_count: int = 10,
    has_animations: bool = False,
    creation_date: date | None = None,
) -> Presentation:
    return Presentation(
        title="Test deck",
        author="Tester",
        document_id="PRES-0000ABCD",
        presentation_theme="Quarterly review",
        slide_count=slide_count,
        has_animations=has_animations,
        creation_date=creation_date or date.today(),
    )


def test_cost_per_slide() -> None:
    assert _make_presentation(slide_count=5).compute_cost() == 15.0


def test_animations_add_surcharge() -> None:
    deck = _make_presentation(slide_count=5, has_animations=True)
    assert deck.compute_cost() == pytest.approx(40.0)


def test_cost_ignores_page_count() -> None:
    deck = _make_presentation(slide_count=2)
    deck.page_count = 100
    assert deck.compute_cost() == pytest.approx(6.0)


def test_format_is_widescreen() -> None:
    assert _make_presentation().format() == "Presentation format 16:9, color printing"


def test_type_label_uses_default() -> None:
    assert _make_presentation().type_label() == "General document"


def test_fresh_presentation_is_archivable() -> None:
    assert _make_presentation().is_archivable() is True


def test_old_presentation_is_not_archivable() -> None:
    old = shift_months(date.today(), -7)
    assert _make_presentation(creation_date=old).is_archivable() is False


def test_presentation_at_cutoff_is_not_archivable() -> None:
    cutoff = shift_months(date.today(), -6)
    assert _make_presentation(creation_date=cutoff).is_archivable() is False
    assert _make_presentation(creation_date=cutoff + timedelta(days=1)).is_archivable() is True


def test_describe_content_with_animations(narration: list[str]) -> None:
    _make_presentation(slide_count=12, has_animations=True).describe_content(narration.append)
    assert narration == [
        "Generating content for document: Test deck",
        "Building slide structure for theme: Quarterly review",
        "Slide count: 12",
        "Adding animations and transitions",
    ]


def test_describe_content_without_animations(narration: list[str]) -> None:
    _make_presentation(has_animations=False).describe_content(narration.append)
    assert "Adding animations and transitions" not in narration


def test_start_slide_show(narration: list[str]) -> None:
    _make_presentation(slide_count=3).start_slide_show(narration.append)
    assert narration == [
        "Starting slide show: Test deck",
        "Theme: Quarterly review",
        "Slide count: 3",
    ]
