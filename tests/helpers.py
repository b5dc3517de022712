import json
from typing import Any, Dict, List, Optional

import requests

from app.errors import AnalysisError
from app.schemas import AnalysisResult


def sample_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "aiLikelihood": 82,
        "readabilityScore": 64,
        "sentiment": "neutral",
        "keywordDensity": [
            {"word": "content", "count": 7, "percentage": 4.1},
            {"word": "search", "count": 5, "percentage": 2.9},
            {"word": "ranking", "count": 3, "percentage": 1.8},
        ],
        "seoSuggestions": [
            "Add a descriptive H1 heading.",
            "Shorten the opening paragraph.",
            "Link to two related articles.",
        ],
        "detailedAnalysis": "## Summary\n\nThe text reads as **highly uniform**.",
    }
    payload.update(overrides)
    return payload


def make_response(status_code: int, body: Any) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    raw = body if isinstance(body, str) else json.dumps(body)
    response._content = raw.encode("utf-8")
    return response


class FakeClient:
    """Stands in for AnalysisClient; records calls and replays a canned outcome."""

    def __init__(self, result: Optional[AnalysisResult] = None, error: Optional[AnalysisError] = None,
                 on_submit=None):
        self.result = result
        self.error = error
        self.on_submit = on_submit
        self.calls: List[str] = []

    def submit(self, text: str) -> AnalysisResult:
        self.calls.append(text)
        if self.on_submit is not None:
            self.on_submit(text)
        if self.error is not None:
            raise self.error
        return self.result
