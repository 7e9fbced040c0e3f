"""ドメイン層（純粋ロジック/データモデル）。

提供物:
"""

from src.memory_match.domain.constants import (
    LEADERBOARD_LIMIT,
    MATCH_DELAY,
    MATCH_POINTS,
    MISMATCH_DELAY,
    SYMBOL_PALETTE,
    TICK_INTERVAL,
)
from src.memory_match.domain.data import Board, Card, Difficulty, ScoreEntry
from src.memory_match.domain.game import (
    all_matched,
    generate_board,
    select_symbols,
)
from src.memory_match.domain.session import (
    Phase,
    Resolution,
    SessionState,
    flip_card,
    resolve_pair,
    start_round,
    tick_countdown,
)
from src.memory_match.domain.shuffle import DeterministicShuffler, daily_seed

__all__ = [
    # data
    "Board",
    "Card",
    "Difficulty",
    "ScoreEntry",
    # shuffle
    "DeterministicShuffler",
    "daily_seed",
    # game
    "generate_board",
    "select_symbols",
    "all_matched",
    # session
    "Phase",
    "Resolution",
    "SessionState",
    "start_round",
    "flip_card",
    "resolve_pair",
    "tick_countdown",
    # constants
    "SYMBOL_PALETTE",
    "MATCH_POINTS",
    "MATCH_DELAY",
    "MISMATCH_DELAY",
    "TICK_INTERVAL",
    "LEADERBOARD_LIMIT",
]
