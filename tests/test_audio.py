import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from coffee_warrior.audio import AudioCues, load_sound
from coffee_warrior.config import GAME_OVER_VOICE, JUMP_SOUND, LOSE_SOUND, MUSIC_SOUND
from coffee_warrior.events import EventKind, GameEvent


class FakeSound:
    def __init__(self) -> None:
        self.plays: list[int] = []
        self.stops = 0

    def play(self, loops: int = 0) -> None:
        self.plays.append(loops)

    def stop(self) -> None:
        self.stops += 1


class FakeClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


def make_cues():
    sounds = {name: FakeSound() for name in (MUSIC_SOUND, LOSE_SOUND, GAME_OVER_VOICE, JUMP_SOUND)}
    clock = FakeClock()
    return AudioCues(sounds, clock=clock), sounds, clock


def test_music_loops_on_run_start_and_stops_on_game_over() -> None:
    cues, sounds, clock = make_cues()
    cues.on_event(GameEvent(EventKind.RUN_STARTED, 0))
    assert sounds[MUSIC_SOUND].plays == [-1]
    cues.on_event(GameEvent(EventKind.GAME_OVER, 50))
    assert sounds[MUSIC_SOUND].stops == 2  # once on start, once on game over


def test_jump_and_collision_cues() -> None:
    cues, sounds, clock = make_cues()
    cues.on_event(GameEvent(EventKind.JUMP, 3))
    cues.on_event(GameEvent(EventKind.COLLISION, 9))
    assert sounds[JUMP_SOUND].plays == [0]
    assert sounds[LOSE_SOUND].plays == [0]


def test_game_over_voice_waits_then_plays_once() -> None:
    cues, sounds, clock = make_cues()
    clock.now = 1000
    cues.on_event(GameEvent(EventKind.GAME_OVER, 120))
    clock.now = 1599
    cues.update()
    assert sounds[GAME_OVER_VOICE].plays == []
    clock.now = 1600
    cues.update()
    clock.now = 5000
    cues.update()
    assert sounds[GAME_OVER_VOICE].plays == [0]


def test_restart_cancels_pending_voice() -> None:
    cues, sounds, clock = make_cues()
    cues.on_event(GameEvent(EventKind.GAME_OVER, 10))
    cues.on_event(GameEvent(EventKind.RUN_STARTED, 0))
    clock.now = 10_000
    cues.update()
    assert sounds[GAME_OVER_VOICE].plays == []


def test_missing_sounds_are_silent(tmp_path) -> None:
    assert load_sound(tmp_path / "nope.wav") is None
    cues = AudioCues({}, clock=FakeClock())
    cues.on_event(GameEvent(EventKind.JUMP, 1))
    cues.on_event(GameEvent(EventKind.GAME_OVER, 1))
    cues.update()
