from __future__ import annotations

import json
from pathlib import Path

from game.persistence import HighScoreStore, state_dir, state_path


def test_missing_file_means_zero(tmp_path: Path) -> None:
    assert HighScoreStore(tmp_path / "nope.json").load() == 0


def test_roundtrip_under_high_score_key(tmp_path: Path) -> None:
    p = tmp_path / "hs" / "highscore.json"
    store = HighScoreStore(p)
    store.save(51)
    assert store.load() == 51
    assert json.loads(p.read_text(encoding="utf-8")) == {"highScore": 51}
    # no leftover temp files
    assert [f.name for f in p.parent.iterdir()] == ["highscore.json"]


def test_corrupt_or_odd_payloads_mean_zero(tmp_path: Path) -> None:
    p = tmp_path / "highscore.json"
    store = HighScoreStore(p)
    for raw in [
        "{not json",
        "[1, 2]",
        '{"highScore": -4}',
        '{"highScore": true}',
        '{"other": 9}',
        '{"highScore": 1e999}',
        '{"highScore": Infinity}',
        '{"highScore": NaN}',
    ]:
        p.write_text(raw, encoding="utf-8")
        assert store.load() == 0


def test_string_values_are_accepted(tmp_path: Path) -> None:
    p = tmp_path / "highscore.json"
    p.write_text('{"highScore": "12"}', encoding="utf-8")
    assert HighScoreStore(p).load() == 12


def test_default_path_follows_env_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("SOONER_STATE_DIR", str(tmp_path / "custom"))
    assert state_dir() == tmp_path / "custom"
    store = HighScoreStore()
    store.save(7)
    assert state_path().exists()
    assert HighScoreStore().load() == 7


def test_unwritable_location_is_reported_not_raised(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = HighScoreStore(blocker / "highscore.json")
    store.save(3)
    assert "[HighScore]" in capsys.readouterr().out
    assert store.load() == 0


def test_infinite_high_score_does_not_break_startup(tmp_path: Path) -> None:
    from game.session import GameSession

    p = tmp_path / "highscore.json"
    p.write_text('{"highScore": 1e999}', encoding="utf-8")
    assert GameSession(HighScoreStore(p)).high_score == 0
