from __future__ import annotations

import pytest


@pytest.fixture
def narration() -> list[str]:
    """Collects narration lines; pass `narration.append` as the echo callable."""
    return []
