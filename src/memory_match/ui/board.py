from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.memory_match.domain import Card, SessionState

# 絵柄名 -> 表示用の絵文字
SYMBOL_LABELS: dict[str, str] = {
    "flower": "🌸",
    "star": "⭐",
    "moon": "🌙",
    "heart": "❤️",
    "sun.max": "☀️",
    "cloud": "☁️",
    "bolt": "⚡",
    "leaf": "🍃",
    "flame": "🔥",
    "drop": "💧",
}

CARD_BACK = "🂠"
BOARD_COLUMNS = 4


def card_label(card: Card) -> str:
    if card.matched:
        return "✔"
    if card.revealed:
        return SYMBOL_LABELS.get(card.symbol, card.symbol)
    return CARD_BACK


def render_board(state: SessionState, on_click: Callable[[int], None]) -> None:
    """盤面を描画し、クリックで on_click(index) を呼び出す。"""
    board = state.board
    for start in range(0, len(board), BOARD_COLUMNS):
        cols = st.columns(BOARD_COLUMNS)
        for offset, card in enumerate(board[start : start + BOARD_COLUMNS]):
            index = start + offset
            disabled = card.face_up or not state.accepts_flips
            if cols[offset].button(
                card_label(card),
                key=f"card-{state.epoch}-{index}",
                use_container_width=True,
                disabled=disabled,
            ):
                on_click(index)
                st.rerun()
