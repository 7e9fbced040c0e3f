"""Streamlit セッション状態アダプタ。

目的:
- UI 層でのみ `st.session_state` を扱うための薄い抽象を提供する。
- アプリ層ポート `KeyValueStore` の実装を提供する（ブラウザセッション内でのみ保持）。

使い方:
- UI コードで `StSessionStore` を生成し、サービス関数へ渡す。
"""

from __future__ import annotations

from typing import Any

from src.memory_match.app.ports.kv_store import KeyValueStore


class StSessionStore(KeyValueStore):
    """Streamlit 実装の KeyValueStore。"""

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - UI 橋渡しのため Any 許容
        import streamlit as st

        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - UI 橋渡しのため Any 許容
        import streamlit as st

        st.session_state[key] = value

    def remove(self, key: str) -> None:
        import streamlit as st

        st.session_state.pop(key, None)
