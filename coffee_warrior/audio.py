"""Sound feedback driven by simulation events."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pygame

from .config import (
    GAME_OVER_VOICE,
    GAME_OVER_VOICE_DELAY_MS,
    JUMP_SOUND,
    LOSE_SOUND,
    MUSIC_SOUND,
)
from .events import EventKind, GameEvent

logger = logging.getLogger(__name__)


def load_sound(path: Path) -> pygame.mixer.Sound | None:
    """Load a sound, or return None (with a warning) if it cannot be played."""
    if not path.is_file():
        logger.warning("Sound file missing: %s", path)
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error as e:
        logger.warning("Could not load sound %s: %s", path, e)
        return None


class AudioCues:
    """Plays music and effects in response to game events.

    Any missing sound is simply skipped; audio never changes game state.
    The game-over voice line waits ``voice_delay_ms`` after the crash and is
    triggered from ``update`` with the host's clock.
    """

    def __init__(
        self,
        sounds: dict[str, pygame.mixer.Sound | None] | None = None,
        *,
        clock: Callable[[], int] = pygame.time.get_ticks,
        voice_delay_ms: int = GAME_OVER_VOICE_DELAY_MS,
    ) -> None:
        self.sounds = sounds or {}
        self.clock = clock
        self.voice_delay_ms = voice_delay_ms
        self._game_over_at: int | None = None
        self._voice_played = False

    @classmethod
    def load(cls, asset_dir: Path) -> "AudioCues":
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning("Audio disabled: %s", e)
                return cls()
        names = (MUSIC_SOUND, LOSE_SOUND, GAME_OVER_VOICE, JUMP_SOUND)
        return cls({name: load_sound(asset_dir / name) for name in names})

    def _play(self, name: str, loops: int = 0) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play(loops=loops)

    def _stop(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.stop()

    def on_event(self, event: GameEvent) -> None:
        if event.kind is EventKind.RUN_STARTED:
            for name in (GAME_OVER_VOICE, LOSE_SOUND, MUSIC_SOUND):
                self._stop(name)
            self._game_over_at = None
            self._voice_played = False
            self._play(MUSIC_SOUND, loops=-1)
        elif event.kind is EventKind.JUMP:
            self._play(JUMP_SOUND)
        elif event.kind is EventKind.COLLISION:
            self._play(LOSE_SOUND)
        elif event.kind is EventKind.GAME_OVER:
            self._stop(MUSIC_SOUND)
            self._game_over_at = self.clock()
            self._voice_played = False

    def update(self) -> None:
        if self._game_over_at is None or self._voice_played:
            return
        if self.clock() >= self._game_over_at + self.voice_delay_ms:
            self._play(GAME_OVER_VOICE)
            self._voice_played = True
