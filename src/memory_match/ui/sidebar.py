from __future__ import annotations

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.services import app_state
from src.memory_match.services.gameplay import GameSession


def render_sidebar(store: StSessionStore, session: GameSession) -> None:
    """サイドバーの設定 UI を描画する。

    - ミュート切替はプレイ中でも反映する。
    - ページリンクは利用可能な場合のみ表示する。
    """
    with st.sidebar:
        st.subheader("Settings")
        muted = bool(getattr(session.audio, "muted", False))
        new_muted = st.toggle("Mute", value=muted)
        app_state.set_muted(store, bool(new_muted))

        if hasattr(st.sidebar, "page_link"):
            st.divider()
            st.page_link("pages/leaderboard.py", label="🏆 View Leaderboard")
