import html

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from wordle_golf.config import PLAYER_NAME, SCORECARD_HOLES
from wordle_golf.exceptions import DuplicateEntryError, ParseError, RemoteSyncError
from wordle_golf.golf.scorecard import scorecard_frame
from wordle_golf.golf.strokes import format_strokes, scoring_guide, strokes_for
from wordle_golf.ingestion.paste_mode import ingest_share_text
from wordle_golf.session import ScoreBoardSession
from wordle_golf.store import ScoreStoreClient

# --- Page Configuration ---
st.set_page_config(
    page_title="Wordle Golf",
    page_icon="⛳",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# --- Design System ---
ACCENT_COLORS = {
    "primary": "#15803D",       # Fairway green
    "success": "#10B981",       # Under par
    "neutral": "#3B82F6",       # Par
    "danger": "#EF4444",        # Over par
    "fail": "#B91C1C",          # X/6 bar
}

# --- Leaderboard Flourishes ---
RANK_ICONS = {
    1: {"icon": "🥇", "color": "#FFD700", "label": "Champion"},
    2: {"icon": "🥈", "color": "#C0C0C0", "label": "Runner-up"},
    3: {"icon": "🥉", "color": "#CD7F32", "label": "Third Place"},
}

SHARE_PLACEHOLDER = "Wordle 1,234 4/6\n\n⬜🟨⬜⬜🟩\n🟩⬜🟩🟩🟩\n🟩🟩🟩🟩🟩"

# --- Session State Keys ---
SHARE_TEXT_KEY = "share_text"
ADD_OUTCOME_KEY = "add_outcome"


def strokes_color(strokes):
    """Green under par, blue at par, red over par."""
    if strokes < 0:
        return ACCENT_COLORS["success"]
    if strokes == 0:
        return ACCENT_COLORS["neutral"]
    return ACCENT_COLORS["danger"]


def generate_leaderboard_cards(entries, you):
    """
    Generate HTML cards for the leaderboard.
    Shows: rank (podium icons for the top three), player, holes played, strokes.
    """
    if not entries:
        return "<p>No data available</p>"

    card_base = "border:1px solid rgba(128,128,128,0.3);border-radius:12px;padding:0.75rem 1rem;margin-bottom:0.5rem;display:flex;align-items:center;justify-content:space-between;"
    you_style = f"border:2px solid {ACCENT_COLORS['primary']};background:rgba(21,128,61,0.12);"

    cards = []
    for entry in entries:
        if entry.rank in RANK_ICONS:
            info = RANK_ICONS[entry.rank]
            rank_html = f'<span style="color:{info["color"]};font-size:1.4rem;" title="{info["label"]}">{info["icon"]}</span>'
        else:
            rank_html = f'<span style="font-weight:600;">#{entry.rank}</span>'

        style = card_base + (you_style if entry.player_name == you else "")
        name = html.escape(entry.player_name)
        strokes = format_strokes(entry.total_strokes)
        color = strokes_color(entry.total_strokes)

        cards.append(
            f'<div style="{style}">'
            f'<div style="display:flex;align-items:center;gap:0.75rem;">{rank_html}'
            f'<div><div style="font-weight:700;font-size:1.1rem;">{name}</div>'
            f'<div style="font-size:0.8rem;opacity:0.7;">{entry.total_games} holes</div></div></div>'
            f'<div style="font-size:1.8rem;font-weight:700;color:{color};">{strokes}</div>'
            f'</div>'
        )

    return "".join(cards)


def apply_plotly_style(fig):
    """Apply consistent styling to Plotly figures."""
    fig.update_layout(
        margin=dict(l=10, r=10, t=30, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
    )
    fig.update_xaxes(showgrid=True, gridcolor="rgba(128, 128, 128, 0.3)")
    fig.update_yaxes(showgrid=False)
    return fig


def guess_distribution_chart(distribution):
    """Horizontal bar chart of guesses 1-6 plus X."""
    labels = [str(i) for i in range(1, len(distribution))] + ["X"]
    colors = [ACCENT_COLORS["primary"]] * (len(distribution) - 1) + [ACCENT_COLORS["fail"]]
    fig = go.Figure(go.Bar(
        x=list(distribution),
        y=labels,
        orientation="h",
        marker_color=colors,
        text=[c if c > 0 else "" for c in distribution],
        textposition="inside",
    ))
    fig.update_yaxes(autorange="reversed", title=None)
    fig.update_xaxes(title=None)
    return apply_plotly_style(fig)


@st.cache_resource
def get_store_client():
    """One HTTP client shared by all browser sessions."""
    return ScoreStoreClient()


def get_session(player_name):
    """Per-browser session; recreated when the player name changes."""
    session = st.session_state.get("score_session")
    if session is None or session.player_name != player_name:
        session = ScoreBoardSession(get_store_client(), player_name)
        st.session_state["score_session"] = session
        refresh(session)
    return session


def refresh(session):
    """Reload the snapshot, keeping the previous one on failure."""
    try:
        session.reload()
    except RemoteSyncError as e:
        st.error(str(e))


def submit_share_text(session, state):
    """
    Add Score callback: ingest the pasted text and store the outcome in state.
    The pasted text is cleared only after a successful save.
    """
    try:
        result = ingest_share_text(session, state.get(SHARE_TEXT_KEY, ""))
    except (ParseError, DuplicateEntryError, RemoteSyncError) as e:
        state[ADD_OUTCOME_KEY] = {"error": str(e)}
        return

    record = result['record']
    state[SHARE_TEXT_KEY] = ""
    state[ADD_OUTCOME_KEY] = {
        "success": f"Score added successfully! Puzzle {record.puzzle_number}: {format_strokes(strokes_for(record.guesses))}",
        "warnings": result['warnings'],
    }


# --- Tabs ---
def render_add_tab(session):
    st.subheader("Add Your Score")
    st.caption("Paste your Wordle share result below:")

    with st.form("add_score"):
        st.text_area("Share text", placeholder=SHARE_PLACEHOLDER, height=160,
                     label_visibility="collapsed", key=SHARE_TEXT_KEY)
        st.form_submit_button("Add Score", use_container_width=True,
                              on_click=submit_share_text, args=(session, st.session_state))

    outcome = st.session_state.pop(ADD_OUTCOME_KEY, None)
    if outcome is None:
        return
    if "error" in outcome:
        st.error(outcome["error"])
        return

    st.success(outcome["success"])
    for w in outcome["warnings"]:
        st.warning(w)


def render_scorecard_tab(session):
    st.subheader("⛳ Tournament Scorecard")
    if not session.snapshot:
        st.info("No scores yet. Add your first score to get started!")
        return

    with st.expander("🏌️ Scoring Guide"):
        st.dataframe(pd.DataFrame(scoring_guide()), hide_index=True, use_container_width=True)

    entries = session.leaderboard()
    st.markdown("#### 🏆 Leaderboard")
    st.markdown(generate_leaderboard_cards(entries, session.player_name), unsafe_allow_html=True)

    st.markdown(f"#### 📋 Scorecard (Last {SCORECARD_HOLES} Holes)")
    grid = session.scorecard()
    st.dataframe(scorecard_frame(grid), use_container_width=True)


def render_stats_tab(session):
    stats = session.my_statistics()
    if not stats.has_data:
        st.info("No stats yet. Add your first score to see statistics!")
        return

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Games Played", stats.total_games)
    col2.metric("Win Rate", f"{stats.win_rate}%")
    col3.metric("🔥 Current Streak", stats.current_streak, help=f"Best: {stats.max_streak}")
    col4.metric("Total Strokes", format_strokes(stats.total_strokes))

    st.caption(f"Average guesses (solved): {stats.avg_guesses:.2f} · Max streak: {stats.max_streak}")
    st.markdown("#### Guess Distribution")
    st.plotly_chart(guess_distribution_chart(stats.guess_distribution), use_container_width=True)


def render_history_tab(session):
    st.subheader("Your Score History")
    history = session.my_history()
    if history.empty:
        st.info("No history yet. Start adding scores to build your history!")
        return
    st.dataframe(history, hide_index=True, use_container_width=True)


# --- Main App ---
def main():
    st.title("🟩 Wordle Golf")

    with st.sidebar:
        st.header("👤 Player")
        player_name = st.text_input("Playing as", value=PLAYER_NAME)

    if not player_name.strip():
        st.warning("Enter your player name in the sidebar to start.")
        return

    try:
        session = get_session(player_name)
    except ValueError as e:
        st.error(str(e))
        return

    header_left, header_right = st.columns([4, 1])
    header_left.caption(f"Playing as: **{session.player_name}**")
    if header_right.button("🔄 Refresh", use_container_width=True):
        refresh(session)
    if session.last_synced:
        header_left.caption(f"Last synced {session.last_synced:%H:%M:%S}")

    TAB_OPTIONS = ["📅 Add", "⛳ Scorecard", "📊 Stats", "📈 History"]
    active_tab = st.radio(
        "Navigation",
        TAB_OPTIONS,
        horizontal=True,
        label_visibility="collapsed",
        key="tab_selector"
    )

    if active_tab == "📅 Add":
        render_add_tab(session)
    elif active_tab == "⛳ Scorecard":
        render_scorecard_tab(session)
    elif active_tab == "📊 Stats":
        render_stats_tab(session)
    else:
        render_history_tab(session)


if __name__ == "__main__":
    main()
