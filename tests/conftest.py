import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from songpad.app.services.analysis_service import AnalysisService


SAMPLE_LYRICS = """Walking down the road today
Hoping you will find a way
Underneath the silver light
Holding on with all my might

---
The river runs so cold
Another story told
I keep it in my hand
"""


@pytest.fixture
def sample_lyrics() -> str:
    return SAMPLE_LYRICS


@pytest.fixture
def analysis_service() -> AnalysisService:
    """Service instance with the default ``---`` break marker."""

    return AnalysisService()
