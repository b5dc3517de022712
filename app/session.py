# app/session.py

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from app.client import TRANSPORT_FAILURE_MESSAGE, AnalysisClient
from app.errors import AnalysisError, ValidationError
from app.presentation import char_count, word_count
from app.schemas import AnalysisResult

logger = logging.getLogger(__name__)

# --- Constants ---
MIN_ANALYSIS_LENGTH = 50
VALIDATION_MESSAGE = "Please enter at least 50 characters for a meaningful analysis."


class Phase(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    ANALYZING = "analyzing"
    RESULT = "result"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionState:
    """One immutable snapshot of the editor session. Every transition builds a new one."""
    text: str = ""
    phase: Phase = Phase.IDLE
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @property
    def is_analyzing(self) -> bool:
        return self.phase is Phase.ANALYZING

    @property
    def can_submit(self) -> bool:
        return not self.is_analyzing and bool(self.text.strip())

    @property
    def word_count(self) -> int:
        return word_count(self.text)

    @property
    def char_count(self) -> int:
        return char_count(self.text)


# --- Events ---
@dataclass(frozen=True)
class TextChanged:
    text: str


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class AnalysisSucceeded:
    result: AnalysisResult


@dataclass(frozen=True)
class AnalysisFailed:
    message: str


@dataclass(frozen=True)
class SessionCleared:
    pass


Event = Union[TextChanged, SubmitRequested, AnalysisSucceeded, AnalysisFailed, SessionCleared]


def validate_text(text: str) -> str:
    """Returns the text unchanged, or raises ValidationError if too short to analyse."""
    if len(text.strip()) < MIN_ANALYSIS_LENGTH:
        raise ValidationError(VALIDATION_MESSAGE)
    return text


def reduce(state: SessionState, event: Event) -> SessionState:
    """Pure transition function for the editor session."""
    if isinstance(event, TextChanged):
        if state.is_analyzing:
            # Editing is allowed mid-flight; the phase only moves on the response.
            return replace(state, text=event.text)
        if not event.text and state.result is None:
            return replace(state, text=event.text, phase=Phase.IDLE)
        return replace(state, text=event.text, phase=Phase.EDITING)

    if isinstance(event, SubmitRequested):
        if state.is_analyzing:
            return state
        try:
            validate_text(state.text)
        except ValidationError as e:
            return replace(state, phase=Phase.FAILED, result=None, error=e.message)
        return replace(state, phase=Phase.ANALYZING, error=None)

    # Responses are applied whatever the current phase: last write wins.
    if isinstance(event, AnalysisSucceeded):
        return replace(state, phase=Phase.RESULT, result=event.result, error=None)

    if isinstance(event, AnalysisFailed):
        return replace(state, phase=Phase.FAILED, result=None, error=event.message)

    if isinstance(event, SessionCleared):
        return SessionState()

    raise TypeError(f"Unknown session event: {event!r}")


class AnalysisSession:
    """
    Drives one editor session against an AnalysisClient.

    Holds the current SessionState and routes every change through `reduce`.
    A submission is two steps so a UI can render the in-flight state between
    them: `begin_submit` validates and enters ANALYZING, `complete_submit`
    makes the request and applies the outcome. At most one request is in
    flight; both steps are no-ops when they do not apply.
    """

    def __init__(self, client: AnalysisClient, state: Optional[SessionState] = None):
        self.client = client
        self._state = state or SessionState()
        self._request_in_flight = False

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event: Event) -> SessionState:
        previous_phase = self._state.phase
        self._state = reduce(self._state, event)
        if self._state.phase is not previous_phase:
            logger.debug(f"Session phase {previous_phase.value} -> {self._state.phase.value}")
        return self._state

    def update_text(self, text: str) -> SessionState:
        return self.dispatch(TextChanged(text))

    def clear(self) -> SessionState:
        return self.dispatch(SessionCleared())

    def begin_submit(self) -> SessionState:
        if self._state.is_analyzing:
            logger.warning("Submission ignored: an analysis is already in flight.")
            return self._state

        state = self.dispatch(SubmitRequested())
        if not state.is_analyzing:
            logger.info(f"Submission rejected locally: {state.error}")
        return state

    def complete_submit(self) -> SessionState:
        if not self._state.is_analyzing or self._request_in_flight:
            return self._state

        self._request_in_flight = True
        try:
            result = self.client.submit(self._state.text)
        except AnalysisError as e:
            logger.warning(f"Analysis failed: {e}")
            return self.dispatch(AnalysisFailed(e.message))
        except Exception as e:
            logger.error(f"Unexpected error during analysis: {e}", exc_info=True)
            return self.dispatch(AnalysisFailed(TRANSPORT_FAILURE_MESSAGE))
        finally:
            self._request_in_flight = False
        return self.dispatch(AnalysisSucceeded(result))

    def submit(self) -> SessionState:
        """Validates, requests and applies the outcome in one call."""
        if self._state.is_analyzing:
            logger.warning("Submission ignored: an analysis is already in flight.")
            return self._state
        self.begin_submit()
        return self.complete_submit()
