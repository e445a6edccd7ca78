"""
audio.py: Fire-and-forget sound cues. Playback problems never reach the game loop.
"""

import logging
import os
from enum import Enum
from typing import Dict, Optional

import pygame

from .constants import SOUND_DIR

logger = logging.getLogger(__name__)


class Cue(Enum):
    """The four sounds the game can trigger."""
    WING = "wing"
    POINT = "point"
    HIT = "hit"
    DIE = "die"


class NullAudio:
    """Silent cue player for headless runs and tests."""

    def play(self, cue: Cue) -> None:
        pass


class AudioCues:
    """Plays cues through pygame.mixer; a cue that failed to load stays silent."""

    def __init__(self, sound_dir: str = SOUND_DIR, volume: float = 0.95) -> None:
        self.enabled = True
        self.sounds: Dict[Cue, Optional["pygame.mixer.Sound"]] = {}

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            logger.warning("Audio device unavailable, cues disabled: %s", e)
            self.enabled = False
            return

        for cue in Cue:
            self.sounds[cue] = self._load_sound(os.path.join(sound_dir, f"{cue.value}.wav"), volume)

    def _load_sound(self, path: str, volume: float):
        """Load a sound file, return None if missing or invalid."""
        if not os.path.exists(path):
            logger.debug("Sound %s not found", path)
            return None
        try:
            sound = pygame.mixer.Sound(path)
            sound.set_volume(volume)
            return sound
        except pygame.error as e:
            logger.warning("Could not load sound %s: %s", path, e)
            return None

    def play(self, cue: Cue) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.stop()  # restart from the beginning if already playing
            sound.play()
        except pygame.error as e:
            logger.debug("Cue %s dropped: %s", cue.value, e)

    def toggle(self) -> bool:
        """Toggle sound on/off. Returns the new state."""
        self.enabled = not self.enabled
        return self.enabled
