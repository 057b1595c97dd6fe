"""Streamlit dashboard for CineChat."""

import json
import logging

import pandas as pd
import streamlit as st

from cinechat.core.aggregation import build_dashboard
from cinechat.core.constants import DashboardConstants
from cinechat.core.filtering import filter_records, distinct_genres
from cinechat.services.analyzer import AnalysisSession, AnalysisStatus
from cinechat.services.llm import ExtractionServiceFactory
from cinechat.utils.data_prep import prepare_export

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _stats_frame(stats, label="name", value="movies"):
    """Turn derived stats into a DataFrame indexed by label."""
    df = pd.DataFrame([(s.label, s.count) for s in stats], columns=[label, value])
    return df.set_index(label)


def _movies_frame(movies):
    rows = []
    for m in movies:
        rows.append({
            "Title": m.title,
            "Year": m.year,
            "Director": m.director or "",
            "Genres": ", ".join(m.genres),
            "Language": m.language,
            "Country": m.country,
            "Recommender": m.recommender or "",
            "Sentiment": m.sentiment.value if m.sentiment else "",
            "Mentions": m.mention_count or DashboardConstants.DEFAULT_MENTION_COUNT,
            "Summary": m.summary,
        })
    return pd.DataFrame(rows)


# Page configuration
st.set_page_config(
    page_title="CineChat Analyzer",
    page_icon="🎬",
    layout="wide"
)

# One session per browser tab
if "session" not in st.session_state:
    st.session_state["session"] = AnalysisSession(ExtractionServiceFactory.create())
session = st.session_state["session"]

# Header
header_col, reset_col = st.columns([5, 1])
with header_col:
    st.title("🎬 CineChat Analyzer")
with reset_col:
    if session.status == AnalysisStatus.COMPLETE and st.button("🔄 Start Over"):
        session.reset()
        st.rerun()

if session.status == AnalysisStatus.IDLE:
    st.subheader("Turn chat logs into movie recommendations")
    st.write("Upload your movie club's chat history (.txt) and let AI extract, classify, and visualize every movie mentioned.")
    uploaded = st.file_uploader(
        "Export your chat history (WhatsApp, Telegram, Discord, etc.) as a .txt file",
        type=["txt"],
    )
    col1, col2, col3 = st.columns(3)
    col1.info("**Smart Extraction**\n\nIdentify titles even from casual conversation.")
    col2.info("**Auto-Classification**\n\nGenre, Country, Language & Sentiment analysis.")
    col3.info("**Visual Insights**\n\nSee what your group loves the most.")

    if uploaded is not None:
        text = uploaded.getvalue().decode("utf-8", errors="replace")
        with st.spinner("Analyzing chat log... Extracting movie titles and gathering metadata."):
            try:
                session.analyze(text, source_name=uploaded.name)
            except Exception as e:
                logger.error(f"Analysis failed: {e}")
        st.rerun()

elif session.status == AnalysisStatus.ERROR:
    st.error(f"**Analysis Failed**\n\n{session.error}")
    if st.button("Try Again"):
        session.reset()
        st.rerun()

elif session.status == AnalysisStatus.COMPLETE:
    movies = session.movies
    stats = build_dashboard(movies)

    if session.result.truncated:
        st.warning(f"Only the first {session.result.characters_analyzed:,} characters of the chat log were analyzed.")

    # Top stats cards
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Movies", stats.total_movies)
    col2.metric("Top Genre", stats.top_genre or "N/A")
    col3.metric("Top Country", stats.top_country or "N/A")
    col4.metric("Positive Vibes", f"{stats.positive_ratio:.0%}")

    # Charts
    left, right = st.columns(2)
    with left:
        st.subheader("Genre Distribution")
        if stats.top_genres:
            st.bar_chart(_stats_frame(stats.top_genres, "genre"))
        st.subheader("Release Decades")
        if stats.decades:
            st.bar_chart(_stats_frame(stats.decades, "decade"))
    with right:
        st.subheader("Country of Origin")
        if stats.top_countries:
            st.bar_chart(_stats_frame(stats.top_countries, "country"))
        st.subheader("Sentiment")
        st.bar_chart(pd.DataFrame(
            list(stats.sentiment.items()), columns=["sentiment", "movies"]
        ).set_index("sentiment"))

    left, right = st.columns(2)
    with left:
        st.subheader("🏆 Top Recommenders")
        if stats.top_recommenders:
            st.dataframe(_stats_frame(stats.top_recommenders, "recommender"))
        else:
            st.caption("No recommenders identified.")
    with right:
        st.subheader("🔥 Most Discussed")
        if stats.most_discussed:
            for i, movie in enumerate(stats.most_discussed, 1):
                st.write(f"{i}. **{movie.title}** - {movie.mention_count} mentions")
        else:
            st.caption("No movie came up more than once.")

    # Movie table with filters
    st.subheader("🎞️ Movies")
    search_col, genre_col = st.columns([3, 1])
    with search_col:
        search_term = st.text_input("🔎 Search title or director", value="")
    with genre_col:
        genre_filter = st.selectbox("Genre", distinct_genres(movies))

    visible = filter_records(movies, search_term, genre_filter)
    st.caption(f"Showing {len(visible)} of {len(movies)} movies")
    if visible:
        st.dataframe(_movies_frame(visible), hide_index=True)
    else:
        st.info("No movies match your filters.")

    st.download_button(
        "⬇️ Download JSON",
        data=json.dumps(prepare_export(session.result, stats), indent=2, ensure_ascii=False),
        file_name="cinechat_analysis.json",
        mime="application/json",
    )
