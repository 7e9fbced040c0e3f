from __future__ import annotations

import streamlit as st

from src.memory_match.domain import Phase
from src.memory_match.services.gameplay import GameSession


def render_status(session: GameSession) -> None:
    """スコア・手数・残り時間などのステータスと終了時のメッセージを描画する。"""
    state = session.state
    st.markdown(f"**Current Level:** {state.difficulty.label}")
    c1, c2, c3, c4, c5 = st.columns(5)
    with c1:
        st.metric("High Score", state.high_score)
    with c2:
        st.metric("Score", state.score)
    with c3:
        st.metric("Moves", state.moves)
    with c4:
        st.metric("Time", f"{state.time_remaining}s")
    with c5:
        st.metric("Average", session.average_score())

    if state.daily_mode and state.completed_today:
        st.caption("Today's challenge is complete for this level.")

    if state.phase is Phase.WON:
        st.success(f"🎉 You Won! Score: {state.score} / Moves: {state.moves}")
    elif state.phase is Phase.EXPIRED:
        st.warning(f"⏱️ Time is up. Score: {state.score} / Moves: {state.moves}")
