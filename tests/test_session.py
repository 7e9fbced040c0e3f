from dataclasses import replace

from src.memory_match.domain import (
    Card,
    Difficulty,
    Phase,
    Resolution,
    SessionState,
    flip_card,
    resolve_pair,
    start_round,
    tick_countdown,
)

from .conftest import EASY_LAYOUT, EASY_PAIRS


def _started(**kwargs) -> SessionState:
    board = tuple(Card(symbol=s) for s in EASY_LAYOUT)
    return start_round(SessionState(), Difficulty.EASY, False, board, **kwargs)


def test_start_round_resets_stats_and_bumps_epoch() -> None:
    state = _started(high_score=30)
    assert state.phase is Phase.PLAYING
    assert state.epoch == 1
    assert (state.score, state.moves, state.pending_index) == (0, 0, None)
    assert state.time_remaining == 60
    assert state.high_score == 30
    assert state.timer_running is True
    again = start_round(state, Difficulty.HARD, True, state.board)
    assert again.epoch == 2
    assert again.time_remaining == 30
    assert again.daily_mode is True


def test_first_flip_records_pending_without_move() -> None:
    state, resolution = flip_card(_started(), 0)
    assert resolution is None
    assert state.pending_index == 0
    assert state.moves == 0
    assert state.board[0].revealed is True


def test_illegal_flips_leave_state_unchanged() -> None:
    state, _ = flip_card(_started(), 0)
    for index in (0, -1, 8, 100):
        after, resolution = flip_card(state, index)
        assert after is state
        assert resolution is None
    assert flip_card(SessionState(), 0)[0] == SessionState()


def test_second_flip_counts_move_and_locks_input() -> None:
    state, _ = flip_card(_started(), 0)
    state, resolution = flip_card(state, 5)
    assert resolution == Resolution(epoch=1, first=0, second=5, matched=True)
    assert state.moves == 1
    assert state.input_locked is True
    assert state.phase is Phase.RESOLVING
    locked, none = flip_card(state, 1)
    assert locked is state
    assert none is None


def test_match_resolution_scores_and_unlocks() -> None:
    state, _ = flip_card(_started(), 0)
    state, resolution = flip_card(state, 5)
    state = resolve_pair(state, resolution)
    assert state.board[0].matched and state.board[5].matched
    assert state.score == 10
    assert state.pending_index is None
    assert state.input_locked is False
    assert state.phase is Phase.PLAYING


def test_mismatch_resolution_hides_both_cards() -> None:
    state, _ = flip_card(_started(), 0)
    state, resolution = flip_card(state, 1)
    assert resolution is not None and resolution.matched is False
    state = resolve_pair(state, resolution)
    for i in (0, 1):
        assert state.board[i].revealed is False
        assert state.board[i].matched is False
    assert state.score == 0
    assert state.moves == 1
    assert state.phase is Phase.PLAYING


def test_stale_resolution_is_ignored() -> None:
    state, _ = flip_card(_started(), 0)
    state, resolution = flip_card(state, 1)
    restarted = start_round(state, Difficulty.EASY, False, tuple(Card(symbol=s) for s in EASY_LAYOUT))
    assert resolve_pair(restarted, resolution) is restarted
    assert resolve_pair(state, replace(resolution, first=3)) is state


def test_last_pair_wins_and_stops_timer() -> None:
    state = _started()
    for first, second in EASY_PAIRS:
        state, _ = flip_card(state, first)
        state, resolution = flip_card(state, second)
        state = resolve_pair(state, resolution)
    assert state.phase is Phase.WON
    assert state.timer_running is False
    assert state.score == 40
    assert state.moves == 4
    assert tick_countdown(state) is state


def test_tick_counts_down_to_expired_and_never_below_zero() -> None:
    state = _started()
    for _ in range(59):
        state = tick_countdown(state)
    assert state.time_remaining == 1
    assert state.phase is Phase.PLAYING
    state = tick_countdown(state)
    assert state.time_remaining == 0
    assert state.phase is Phase.EXPIRED
    assert state.timer_running is False
    assert tick_countdown(state).time_remaining == 0
    assert flip_card(state, 0)[0] is state


def test_expiry_during_resolution_discards_pending_result() -> None:
    state, _ = flip_card(_started(), 0)
    state, resolution = flip_card(state, 5)
    for _ in range(60):
        state = tick_countdown(state)
    assert state.phase is Phase.EXPIRED
    assert resolve_pair(state, resolution) is state
