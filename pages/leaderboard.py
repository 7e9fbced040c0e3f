"""
リーダーボードページ
- セッション中のゲームと同じ保存先から、難易度ごとの上位 10 件を表示します。
- 閲覧専用。このページを先に開いてもラウンドは開始しません。
"""

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.domain import Difficulty
from src.memory_match.services import app_state
from src.memory_match.services.leaderboard import leaderboard_frame

st.set_page_config(page_title="Leaderboard", layout="centered")

leaderboard, default_difficulty = app_state.get_leaderboard(StSessionStore())
options = list(Difficulty)
difficulty = st.radio(
    "Difficulty",
    options=options,
    index=options.index(default_difficulty),
    format_func=lambda d: d.label,
    horizontal=True,
)
st.title(f"🏆 {difficulty.label} Leaderboard")

entries = leaderboard.load_leaderboard(difficulty)
if not entries:
    st.info("No scores yet. Clear a board to get on the leaderboard.")
    st.stop()

st.caption(f"Average score: {leaderboard.average_score(difficulty)}")
st.dataframe(leaderboard_frame(entries), hide_index=True, use_container_width=True)
