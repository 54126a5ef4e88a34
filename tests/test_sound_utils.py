from __future__ import annotations

import pytest

from sound.sound_utils import Sounds


@pytest.fixture(autouse=True)
def _no_mixer(monkeypatch):
    # Never open an audio device from tests
    monkeypatch.setattr(Sounds, "_inited", False)
    monkeypatch.setattr(Sounds, "_failed_init", True)
    yield
    Sounds.stop_music()


def test_play_without_mixer_is_a_no_op() -> None:
    assert not Sounds.is_available()
    assert Sounds.play("collect", volume=1.0) is None


def test_music_without_a_channel_is_not_reported_as_playing() -> None:
    Sounds.play_music("racing", volume=0.5)
    assert Sounds.current_music() is None


def test_music_track_is_replaced_not_stacked(monkeypatch) -> None:
    channels = []

    class Channel:
        def __init__(self) -> None:
            self.stopped = False

        def stop(self) -> None:
            self.stopped = True

    def play(key, *, volume=None, loops=0):
        assert loops == -1
        channels.append(Channel())
        return channels[-1]

    monkeypatch.setattr(Sounds, "play", play)
    Sounds.play_music("racing", volume=0.5)
    assert Sounds.current_music() == "racing"
    Sounds.play_music("racing", volume=0.5)
    assert Sounds.current_music() == "racing"
    assert [c.stopped for c in channels] == [True, False]
    Sounds.stop_music()
    assert channels[1].stopped
    assert Sounds.current_music() is None


def test_strict_load_raises_for_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        Sounds.load("jump", str(tmp_path / "jump.mp3"))


def test_optional_load_skips_missing_file(tmp_path, capsys) -> None:
    assert Sounds.load_optional("jump", str(tmp_path / "jump.mp3")) is None
    assert "Skipping missing file" in capsys.readouterr().out
    assert not Sounds.is_loaded("jump")
