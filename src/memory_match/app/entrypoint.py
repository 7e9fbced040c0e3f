import logging

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.services import app_state
from src.memory_match.services.config_loader import get_app_title
from src.memory_match.services.gameplay import GameSession
from src.memory_match.ui.audio_player import render_audio_cues
from src.memory_match.ui.board import render_board
from src.memory_match.ui.header import render_header
from src.memory_match.ui.sidebar import render_sidebar
from src.memory_match.ui.status import render_status

# 判定待ち・カウントダウンを進めるための再描画間隔（秒）
REFRESH_INTERVAL = 0.25


def _render_theme(session: GameSession) -> None:
    color = session.state.difficulty.theme_color
    st.markdown(
        f"<style>.stApp {{ background-color: {color}; }}</style>",
        unsafe_allow_html=True,
    )


@st.fragment(run_every=REFRESH_INTERVAL)
def _render_game(store: StSessionStore, session: GameSession) -> None:
    # 期限の来た予約（判定・カウントダウン）を進めてから描画する
    session.pump()
    render_status(session)
    st.divider()
    render_board(session.state, session.flip)
    render_audio_cues(store)


def main():
    st.set_page_config(page_title="Memory Game", layout="centered")
    logging.basicConfig(level=logging.INFO)

    try:
        store = StSessionStore()
        session = app_state.initialize_state(store)
    except Exception as e:
        st.error(f"ゲームの初期化に失敗しました: {e}")
        return

    st.title(get_app_title())
    _render_theme(session)
    render_sidebar(store, session)
    render_header(session)
    _render_game(store, session)
