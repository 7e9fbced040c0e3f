from __future__ import annotations

import base64

import streamlit as st

from src.memory_match.adapters.session_store_streamlit import StSessionStore
from src.memory_match.services.audio import drain_audio_bytes


def build_autoplay_html(audio_bytes: bytes, player_id: str) -> str:
    """自動再生用の HTML を生成する（プレーヤーは非表示）。"""
    b64 = base64.b64encode(audio_bytes).decode("utf-8")
    return f'<audio id="{player_id}" src="data:audio/mp3;base64,{b64}" autoplay style="display:none"></audio>'


def render_audio_cues(store: StSessionStore) -> None:
    """キューに溜まった読み上げを合成・再生し、キューを空にする。"""
    for i, audio_bytes in enumerate(drain_audio_bytes(store)):
        st.markdown(build_autoplay_html(audio_bytes, f"cue-{i}"), unsafe_allow_html=True)
