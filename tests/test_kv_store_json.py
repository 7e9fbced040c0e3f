import json
from pathlib import Path

from src.memory_match.adapters.kv_store_json import JsonFileStore
from src.memory_match.app.state import Settings
from src.memory_match.domain import Difficulty, Phase, ScoreEntry
from src.memory_match.services.gameplay import GameSession
from src.memory_match.services.leaderboard import LeaderboardStore
from src.memory_match.services.scheduler import Scheduler

from .conftest import FakeClock


def test_round_trip_and_remove(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = JsonFileStore(path)
    assert store.get("missing") is None
    assert store.get("missing", 5) == 5
    store.set("HighScore_easy", 40)
    store.set("DailyCompleted_easy_2026-10-19", True)
    assert path.exists()

    reopened = JsonFileStore(path)
    assert reopened.get("HighScore_easy") == 40
    assert reopened.get("DailyCompleted_easy_2026-10-19") is True
    reopened.remove("HighScore_easy")
    reopened.remove("HighScore_easy")
    assert store.get("HighScore_easy") is None


def test_no_temp_files_left_behind(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "store.json")
    for i in range(5):
        store.set(f"k{i}", i)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["store.json"]
    assert json.loads((tmp_path / "store.json").read_text(encoding="utf-8")) == {
        f"k{i}": i for i in range(5)
    }


def test_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)
    assert store.get("anything") is None
    path.write_text("[1, 2]", encoding="utf-8")
    assert store.get("anything") is None
    store.set("k", "v")
    assert store.get("k") == "v"


def test_leaderboard_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    LeaderboardStore(JsonFileStore(path)).save_score_entry(Difficulty.EASY, ScoreEntry(score=40, moves=4))
    entries = LeaderboardStore(JsonFileStore(path)).load_leaderboard(Difficulty.EASY)
    assert [(e.score, e.moves) for e in entries] == [(40, 4)]


def test_overflowing_high_score_does_not_break_restart(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text('{"HighScore_easy": 1e999}', encoding="utf-8")
    session = GameSession(
        LeaderboardStore(JsonFileStore(path)),
        settings=Settings(auto_countdown=False),
        scheduler=Scheduler(clock=FakeClock()),
    )
    state = session.restart(Difficulty.EASY, False)
    assert state.high_score == 0
    assert state.phase is Phase.PLAYING
