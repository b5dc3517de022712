# frontend.py

import streamlit as st

from app.client import AnalysisClient
from app.config import API_BASE_URL, ANALYZE_ENDPOINT_PATH, configure_logging
from app.presentation import (
    LIKELIHOOD_LABELS, create_keyword_chart, create_likelihood_gauge, keyword_frame,
    format_sentiment, likelihood_color, likelihood_label, text_stats,
)
from app.schemas import AnalysisResult
from app.session import MIN_ANALYSIS_LENGTH, AnalysisSession

configure_logging()

# --- Page Configuration ---
st.set_page_config(
    page_title="SEO Content Checker", page_icon="🛡️",
    layout="wide", initial_sidebar_state="collapsed"
)

# --- Initialize Session State ---
if "analysis_session" not in st.session_state: st.session_state.analysis_session = AnalysisSession(AnalysisClient())
if "editor_text" not in st.session_state: st.session_state.editor_text = ""
session: AnalysisSession = st.session_state.analysis_session
if st.session_state.editor_text != session.state.text: session.update_text(st.session_state.editor_text)

SAMPLE_TEXT = (
    "Search engine optimization is the practice of improving a website so that it ranks higher "
    "in search results. Good content answers real questions, uses clear headings, and includes "
    "relevant keywords naturally instead of stuffing them into every sentence."
)

FEATURE_CARDS = [
    ("🛡️", "AI Detection", "Advanced patterns to identify generated text."),
    ("📊", "SEO Metrics", "Keyword density and readability analysis."),
    ("ℹ️", "Human Insights", "Suggestions to improve content authenticity."),
]


# --- Callbacks (run before the script re-executes) ---
def _on_text_change():
    session.update_text(st.session_state.editor_text)


def _begin_submit():
    # The button click may carry text that has not fired on_change yet.
    if st.session_state.editor_text != session.state.text:
        session.update_text(st.session_state.editor_text)
    session.begin_submit()


def _load_sample():
    st.session_state.editor_text = SAMPLE_TEXT
    session.update_text(SAMPLE_TEXT)


def _clear_session():
    st.session_state.editor_text = ""
    session.clear()


# --- Custom CSS ---
st.markdown("""
<style>
.main-header { display: flex; align-items: center; gap: 0.5rem; border-bottom: 1px solid #E5E7EB; margin-bottom: 1.5rem; }
.main-header h1 { font-size: 1.6rem; font-weight: 800; }
.main-header span.accent { color: #4F46E5; }
.counter-bar { font-family: monospace; font-size: 0.8em; color: #9CA3AF; text-align: right; }
.score-box { text-align: center; padding: 10px 0; }
.score-box .score { font-size: 4em; font-weight: 900; line-height: 1; }
.label-badge { display: inline-block; padding: 4px 12px; border-radius: 20px; background: #F3F4F6; color: #4B5563; font-weight: bold; font-size: 0.8em; }
.feature-card { background: white; padding: 15px; border-radius: 12px; border: 1px solid #E5E7EB; height: 100%; }
.ready-panel { background: #4F46E5; color: white; padding: 2rem; border-radius: 16px; }
.ready-panel h2 { color: white; font-weight: 900; }
</style>
""", unsafe_allow_html=True)

# --- Header ---
st.markdown(
    '<div class="main-header"><h1>🛡️ SEO <span class="accent">Checker</span></h1>'
    '<span style="margin-left:auto;color:#6B7280;">⚡ AI-Powered &nbsp;|&nbsp; 🎯 SEO Optimized</span></div>',
    unsafe_allow_html=True)


def render_processing_panel():
    st.subheader("Processing Content")
    st.caption("Our AI is scanning for patterns, keywords, and SEO metrics...")


def render_ready_panel():
    st.markdown("""
<div class="ready-panel">
  <h2>Ready to check your content?</h2>
  <p>Paste your article, blog post, or copy to the left and click "Check Content".
  We'll analyze it for AI patterns and provide SEO optimization tips.</p>
  <ul>
    <li>Real-time AI detection</li>
    <li>Keyword density mapping</li>
    <li>Readability scoring</li>
  </ul>
</div>
""", unsafe_allow_html=True)


def render_result(result: AnalysisResult):
    color = likelihood_color(result.ai_likelihood)
    with st.container(border=True):
        st.markdown(
            f'<div class="score-box"><div style="color:#9CA3AF;font-size:0.75em;font-weight:bold;">AI LIKELIHOOD SCORE</div>'
            f'<div class="score" style="color:{color};">{result.ai_likelihood}%</div>'
            f'<span class="label-badge">{likelihood_label(result.ai_likelihood)}</span></div>',
            unsafe_allow_html=True)
        st.plotly_chart(create_likelihood_gauge(result.ai_likelihood), use_container_width=True)
        metric_col1, metric_col2 = st.columns(2)
        metric_col1.metric("Readability", f"{result.readability_score}/100")
        metric_col2.metric("Sentiment", format_sentiment(result.sentiment))

    with st.container(border=True):
        st.markdown("#### 📊 Keyword Density")
        if result.keyword_density:
            st.plotly_chart(create_keyword_chart(result.keyword_density), use_container_width=True)
            with st.expander("Keyword table"):
                st.dataframe(keyword_frame(result), hide_index=True, use_container_width=True, column_config={
                    "word": "Keyword", "count": "Count",
                    "percentage": st.column_config.NumberColumn("Density (%)", format="%.2f")})
        else:
            st.info("No keywords reported.")

    with st.container(border=True):
        st.markdown("#### ✅ SEO Recommendations")
        if result.seo_suggestions:
            st.markdown("\n".join(f"- {suggestion}" for suggestion in result.seo_suggestions))
        else:
            st.info("No recommendations reported.")

    with st.container(border=True):
        st.markdown("#### ℹ️ Detailed Analysis")
        st.markdown(result.detailed_analysis)

    with st.expander("Show Raw API Response", expanded=False):
        st.json(result.model_dump(by_alias=True))


# --- Main Content ---
editor_col, results_col = st.columns([7, 5])

with editor_col:
    state = session.state
    head_col1, head_col2 = st.columns([1, 1])
    head_col1.markdown("**📝 Content Editor**")
    head_col2.markdown(
        f'<div class="counter-bar">Words: {state.word_count} &nbsp; Chars: {state.char_count}</div>',
        unsafe_allow_html=True)
    st.text_area(
        "Content", key="editor_text", height=400, label_visibility="collapsed",
        placeholder=f"Paste your content here (min {MIN_ANALYSIS_LENGTH} characters)...",
        on_change=_on_text_change,
    )
    action_col1, action_col2, action_col3 = st.columns([2, 1, 1])
    with action_col1:
        st.button(
            "Analyzing..." if state.is_analyzing else "🔍 Check Content",
            type="primary", use_container_width=True, key="check_content_btn",
            disabled=state.is_analyzing, on_click=_begin_submit,
        )
    action_col2.button("Use Sample", use_container_width=True, key="sample_btn", on_click=_load_sample)
    action_col3.button("Clear", type="secondary", use_container_width=True, key="clear_btn", on_click=_clear_session)

    if state.error:
        st.error(state.error, icon="⚠️")

    if state.text:
        stats = text_stats(state.text)
        with st.expander(f"Text Statistics ({stats['word_count']} words, {stats['sentence_count']} sentences)"):
            cols_stats = st.columns(4)
            cols_stats[0].metric("Characters", stats["char_count"])
            cols_stats[1].metric("Words", stats["word_count"])
            cols_stats[2].metric("Sentences", stats["sentence_count"])
            cols_stats[3].metric("Avg Word Length", f"{stats['avg_word_length']:.1f}")

    if state.result is None and not state.is_analyzing:
        card_cols = st.columns(len(FEATURE_CARDS))
        for card_col, (icon, title, desc) in zip(card_cols, FEATURE_CARDS):
            card_col.markdown(
                f'<div class="feature-card">{icon}<br><b>{title}</b><br><small>{desc}</small></div>',
                unsafe_allow_html=True)

with results_col:
    results_placeholder = st.empty()

if session.state.is_analyzing:
    # The submit button above was rendered disabled; now make the blocking request.
    with results_placeholder.container():
        render_processing_panel()
        with st.spinner("Analyzing..."):
            session.complete_submit()
    st.rerun()

with results_placeholder.container():
    state = session.state
    if state.is_analyzing:
        render_processing_panel()
    elif state.result is not None:
        render_result(state.result)
    else:
        render_ready_panel()

with st.expander("How scores are labelled"):
    st.markdown(
        "\n".join(f"- **{low}-{low + 20}:** {label}" for low, label in zip(range(0, 100, 20), LIKELIHOOD_LABELS))
        + "\n\nColour: green below 30, amber from 30 to 69, red from 70.")

# --- Footer ---
st.markdown("---")
st.markdown(
    f"<div style='text-align: center; color: #666; font-size: 0.9em;'>🛡️ SEO AI Checker v1.0 • "
    f"Analysis endpoint: <code>{API_BASE_URL}{ANALYZE_ENDPOINT_PATH}</code></div>",
    unsafe_allow_html=True)
