from __future__ import annotations

import random
from datetime import date

from src.memory_match.domain.constants import SYMBOL_PALETTE
from src.memory_match.domain.data import Board, Card, Difficulty
from src.memory_match.domain.shuffle import DeterministicShuffler, daily_seed


def select_symbols(
    difficulty: Difficulty,
    daily_mode: bool,
    *,
    day: date | None = None,
    rng: random.Random | None = None,
) -> list[str]:
    """パレットをシャッフルし、先頭から pair_count 個の絵柄を選ぶ。

    daily_mode のときは日付シードで並べ替えるため、同じ日なら同じ絵柄セットになる。
    """
    if daily_mode:
        shuffler = DeterministicShuffler(daily_seed(day or date.today()))
        symbols = shuffler.shuffle(SYMBOL_PALETTE)
    else:
        symbols = list(SYMBOL_PALETTE)
        (rng or random).shuffle(symbols)
    return symbols[: difficulty.pair_count]


def generate_board(
    difficulty: Difficulty,
    daily_mode: bool = False,
    *,
    day: date | None = None,
    rng: random.Random | None = None,
) -> Board:
    """新しい盤面を作る。

    - 絵柄選択のみシード対象。ペアの配置は常に非決定的にシャッフルする。
    - 長さは 2 * pair_count、各絵柄はちょうど 2 回現れる。
    """
    selected = select_symbols(difficulty, daily_mode, day=day, rng=rng)
    deck = selected + selected
    (rng or random).shuffle(deck)
    return tuple(Card(symbol=s) for s in deck)


def all_matched(board: Board) -> bool:
    """盤面の全カードがペア成立済みか（空盤面は False）。"""
    return bool(board) and all(card.matched for card in board)
