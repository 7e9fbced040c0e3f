"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# カード絵柄のパレット（ペア数の最大値以上を保持する）
SYMBOL_PALETTE: tuple[str, ...] = (
    "flower",
    "star",
    "moon",
    "heart",
    "sun.max",
    "cloud",
    "bolt",
    "leaf",
    "flame",
    "drop",
)

# 1 ペア成立あたりの加点
MATCH_POINTS: int = 10

# 2 枚目をめくってから自動判定するまでの待ち秒（一致 < 不一致）
MATCH_DELAY: float = 0.4
MISMATCH_DELAY: float = 1.0

# カウントダウンの刻み秒
TICK_INTERVAL: float = 1.0

# リーダーボードの保持件数
LEADERBOARD_LIMIT: int = 10

# 永続化キーの接頭辞（キー値ストア上の名前）
HIGH_SCORE_KEY_PREFIX: str = "HighScore_"
LEADERBOARD_KEY_PREFIX: str = "Leaderboard_"
DAILY_COMPLETED_KEY_PREFIX: str = "DailyCompleted_"
