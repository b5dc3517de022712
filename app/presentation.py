# app/presentation.py

import re
from enum import Enum
from typing import Any, Dict, Sequence

import pandas as pd
import plotly.graph_objects as go

from app.schemas import AnalysisResult, KeywordDensity, Score


class Tier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Least to most severe.
TIER_ORDER = (Tier.LOW, Tier.MEDIUM, Tier.HIGH)

TIER_COLORS: Dict[Tier, str] = {
    Tier.LOW: "#10B981",     # emerald
    Tier.MEDIUM: "#F59E0B",  # amber
    Tier.HIGH: "#F43F5E",    # rose
}

# Least to most AI-like.
LIKELIHOOD_LABELS = (
    "Highly Likely Human",
    "Likely Human",
    "Uncertain / Mixed",
    "Likely AI",
    "Highly Likely AI",
)

TOP_KEYWORD_COLOR = "#4F46E5"
KEYWORD_COLOR = "#818CF8"


# --- Score classification ---
# Colour tiers (30/70) and labels (20/40/60/80) use different boundaries on
# purpose; keep them as two independent mappings.
def likelihood_tier(score: Score) -> Tier:
    """Maps an AI-likelihood score to its colour tier."""
    if score < 30: return Tier.LOW
    elif score < 70: return Tier.MEDIUM
    else: return Tier.HIGH


def likelihood_label(score: Score) -> str:
    """Maps an AI-likelihood score to its descriptive label."""
    if score < 20: return "Highly Likely Human"
    elif score < 40: return "Likely Human"
    elif score < 60: return "Uncertain / Mixed"
    elif score < 80: return "Likely AI"
    else: return "Highly Likely AI"


def likelihood_color(score: Score) -> str:
    return TIER_COLORS[likelihood_tier(score)]


# --- Editor counters ---
def word_count(text: str) -> int:
    return len(text.split())


def char_count(text: str) -> int:
    return len(text)


def text_stats(text: str) -> Dict[str, Any]:
    """Counts for the editor's statistics panel."""
    words = text.split()
    sentences = re.split(r"[.!?]+", text)
    return {
        "char_count": char_count(text),
        "word_count": word_count(text),
        "sentence_count": sum(1 for s in sentences if s.strip()),
        "avg_word_length": sum(map(len, words)) / len(words) if words else 0,
    }


def format_sentiment(sentiment: str) -> str:
    """Uppercases the first letter of each word and leaves the rest as the service sent it."""
    return " ".join(w[:1].upper() + w[1:] for w in sentiment.split(" "))


# --- Result views ---
def keyword_frame(result: AnalysisResult) -> pd.DataFrame:
    """Keyword rows in the service's ranking order."""
    return pd.DataFrame(
        [kw.model_dump() for kw in result.keyword_density],
        columns=["word", "count", "percentage"],
    )


def create_keyword_chart(keyword_density: Sequence[KeywordDensity]) -> go.Figure:
    """Horizontal bar chart of keyword percentages, top-ranked keyword first and highlighted."""
    words = [kw.word for kw in keyword_density]
    percentages = [kw.percentage for kw in keyword_density]
    colors = [TOP_KEYWORD_COLOR if i == 0 else KEYWORD_COLOR for i in range(len(words))]
    fig = go.Figure(go.Bar(
        x=percentages, y=words, orientation="h",
        marker={"color": colors},
        customdata=[kw.count for kw in keyword_density],
        hovertemplate="%{y}: %{x}% (%{customdata} occurrences)<extra></extra>",
    ))
    # Plotly draws the first category at the bottom; reverse so rank order reads top-down.
    fig.update_layout(
        height=max(200, 40 * len(words)), margin=dict(l=20, r=20, t=10, b=10),
        xaxis={"visible": False},
        yaxis={"autorange": "reversed", "categoryorder": "array", "categoryarray": words},
        plot_bgcolor="white",
    )
    return fig


def create_likelihood_gauge(score: Score) -> go.Figure:
    """Gauge chart for the AI-likelihood score, coloured by tier."""
    fig = go.Figure(go.Indicator(
        mode="gauge+number", value=score,
        domain={'x': [0, 1], 'y': [0, 1]},
        number={'suffix': "%", 'font': {'size': 48, 'color': likelihood_color(score)}},
        gauge={
            'axis': {'range': [0, 100], 'tickwidth': 1},
            'bar': {'color': likelihood_color(score), 'thickness': 0.75},
            'bgcolor': "white", 'borderwidth': 0,
            'steps': [
                {'range': [0, 30], 'color': "#ECFDF5"},
                {'range': [30, 70], 'color': "#FFFBEB"},
                {'range': [70, 100], 'color': "#FFF1F2"}],
        }))
    fig.update_layout(height=240, margin=dict(l=30, r=30, t=30, b=10))
    return fig
