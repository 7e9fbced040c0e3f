from __future__ import annotations

import streamlit as st

from src.memory_match.domain import Difficulty
from src.memory_match.services.gameplay import GameSession


def render_header(session: GameSession) -> None:
    """難易度の選択、リスタート、ハイスコア消去を描画する。

    難易度・デイリーモードを変更したら即座に新しいラウンドを開始する。
    """
    state = session.state
    options = list(Difficulty)
    c1, c2 = st.columns([3, 1])
    with c1:
        selected = st.radio(
            "Difficulty",
            options=options,
            index=options.index(state.difficulty),
            format_func=lambda d: d.label,
            horizontal=True,
        )
    with c2:
        daily = st.toggle("Daily challenge", value=state.daily_mode)
    if selected != state.difficulty or daily != state.daily_mode:
        session.restart(selected, daily)
        st.rerun()

    b1, b2, _ = st.columns([1, 1, 3])
    with b1:
        if st.button("Restart Game"):
            session.restart()
            st.rerun()
    with b2:
        if st.button("Reset High Score", type="secondary"):
            session.reset_high_score()
            st.rerun()
