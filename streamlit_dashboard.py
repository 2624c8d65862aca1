import streamlit as st
import pandas as pd
import plotly.express as px

from src.config import ROSTERS
from src.ranking.leaderboard import build_leaderboard, leaderboard_to_frame
from src.scraping.errors import EmptyLeaderboardError

# --- Page Configuration ---
st.set_page_config(
    page_title="TFT Roster Leaderboard",
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# --- Design System ---
ACCENT_COLORS = {
    "primary": "#FF6B6B",       # Coral red - primary accent
    "warning": "#F59E0B",       # Amber - neutral/caution
    "info": "#3B82F6",          # Blue - informational
}

# Icons for the top three players
RANK_ICONS = {
    1: {"icon": "👑", "color": "#FFD700", "label": "Champion"},
    2: {"icon": "🥈", "color": "#C0C0C0", "label": "Runner-up"},
    3: {"icon": "🥉", "color": "#CD7F32", "label": "Third Place"},
}

ROSTER_OPTIONS = {
    "Leaderboard": "main",
    "Leaderboard 2": "secondary",
}


def position_label(position):
    """Podium icon for the top three, #N for everyone else."""
    if pd.isna(position):
        return ""
    position = int(position)
    if position in RANK_ICONS:
        return f"{RANK_ICONS[position]['icon']} #{position}"
    return f"#{position}"


def apply_plotly_style(fig):
    """Apply consistent styling to Plotly figures.

    Text colors are NOT explicitly set, allowing Streamlit to inject theme-aware
    colors automatically.
    """
    system_font = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
    grid_color = "rgba(128, 128, 128, 0.4)"

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(family=system_font, size=16),
        xaxis=dict(gridcolor=grid_color, showgrid=False, zeroline=False),
        yaxis=dict(gridcolor=grid_color, showgrid=True, zeroline=False),
        hoverlabel=dict(bgcolor="rgba(50, 50, 50, 0.9)", font=dict(color="#FFFFFF", family=system_font, size=14)),
        dragmode=False,  # Disable pan/zoom to prevent scroll hijacking on mobile
    )
    return fig


# --- Data Loading Functions ---
def load_leaderboard(roster_name):
    """Scrape a roster and return its leaderboard as a DataFrame, or None if empty."""
    try:
        players = build_leaderboard(ROSTERS[roster_name])
    except EmptyLeaderboardError:
        return None
    return leaderboard_to_frame(players)


# --- Main App ---
def main():
    st.title("🏆 TFT Roster Leaderboard")

    # --- Sidebar ---
    with st.sidebar:
        st.header("📋 Roster")
        roster_label = st.selectbox(
            "Roster",
            options=list(ROSTER_OPTIONS.keys()),
            index=0,
            label_visibility="collapsed"
        )
        roster_name = ROSTER_OPTIONS[roster_label]
        st.caption(", ".join(entry.identifier for entry in ROSTERS[roster_name]))

    with st.spinner("Fetching player profiles..."):
        df = load_leaderboard(roster_name)

    if df is None:
        st.error("Failed to fetch any player data.")
        return

    missing = len(ROSTERS[roster_name]) - len(df)
    if missing:
        st.warning(f"{missing} player(s) could not be fetched and are not shown.")

    df_display = df.copy()
    df_display['position'] = df_display['position'].map(position_label)
    df_display['rank'] = df_display['rank'].replace("", "Unranked")

    column_config = {
        "position": st.column_config.TextColumn("#"),
        "avatar": st.column_config.ImageColumn(""),
        "user": st.column_config.TextColumn("Player"),
        "rank": st.column_config.TextColumn("Rank"),
        "LP": st.column_config.NumberColumn("LP", format="%d"),
        "games": st.column_config.NumberColumn("Games", format="%d"),
        "wins": st.column_config.NumberColumn("Wins", format="%d"),
        "winRate": st.column_config.NumberColumn("Win %", format="%.1f"),
        "top4Count": st.column_config.NumberColumn("Top 4", format="%d"),
        "top4Rate": st.column_config.NumberColumn("Top 4 %", format="%.1f"),
        "avgRank": st.column_config.NumberColumn("Avg Place", format="%.2f"),
        "profileUrl": st.column_config.LinkColumn("Profile", display_text="lolchess.gg"),
    }
    st.dataframe(
        df_display[list(column_config.keys())],
        width='stretch',
        hide_index=True,
        column_config=column_config
    )

    # Rank value chart
    with st.expander("📊 Rank Overview", expanded=False):
        fig_rank = px.bar(
            df,
            x='user',
            y='rankValue',
            hover_data={'rank': True, 'LP': True, 'rankValue': ':.2f'},
            labels={'user': 'Player', 'rankValue': 'Rank Value'},
            color_discrete_sequence=[ACCENT_COLORS["primary"]]
        )
        apply_plotly_style(fig_rank)
        fig_rank.update_layout(
            showlegend=False,
            height=300,
            margin=dict(l=20, r=20, t=30, b=20),
        )
        st.plotly_chart(fig_rank, use_container_width=True, config={'displayModeBar': False, 'scrollZoom': False})

if __name__ == "__main__":
    main()
