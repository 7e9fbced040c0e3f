"""
アプリケーション層のポート: キー値ストア

目的:
- 永続化の具体実装（Streamlit の session_state、JSON ファイル、メモリ）からサービスを切り離す。
- サービス層は本ポート（Protocol）にのみ依存する。
"""

from __future__ import annotations

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """文字列キーの値ストアへのアクセス抽象。

    契約:
    - dict 風の get/set/remove を提供する。
    - set は 1 キー単位で原子的（読み手が書きかけの値を観測しない）。
    - 下層が利用不能な場合は例外を送出してよい（呼び出し側で握る）。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 値の型は実装依存
        """キーに対応する値を取得する。存在しない場合は default を返す。"""

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - 値の型は実装依存
        """キーに値を設定する。"""

    def remove(self, key: str) -> None:
        """キーを削除する。存在しなければ何もしない。"""
