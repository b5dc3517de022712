import pytest

from app.schemas import AnalysisResult
from tests.helpers import sample_payload


@pytest.fixture
def result() -> AnalysisResult:
    return AnalysisResult.model_validate(sample_payload())


@pytest.fixture
def long_text() -> str:
    return "a" * 60
