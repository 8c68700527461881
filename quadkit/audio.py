"""Loading sounds and keeping track of their playback state."""

from __future__ import annotations

import os
from dataclasses import dataclass


class UnknownSoundError(KeyError):
    """Raised when a sound handle does not belong to the audio context."""


@dataclass(frozen=True)
class PlaySoundParams:
    """How a sound is played."""

    looped: bool = False
    volume: float = 1.0


@dataclass(frozen=True)
class Sound:
    """Handle of a sound loaded into an AudioContext."""

    id: int


@dataclass
class _SoundState:
    data: bytes
    playing: bool = False
    looped: bool = False
    volume: float = 1.0


class AudioContext:
    """Owns loaded sounds and hands out handles to them."""

    def __init__(self) -> None:
        self._sounds: dict[int, _SoundState] = {}
        self._next_id = 0
        self.paused = False

    def __len__(self) -> int:
        return len(self._sounds)

    def pause(self) -> None:
        """Suspend all audio output."""
        self.paused = True

    def resume(self) -> None:
        """Resume audio output after `pause`."""
        self.paused = False

    def load_sound(self, path: str | os.PathLike[str]) -> Sound:
        """Read an audio file and register it; OSError if it cannot be read."""
        with open(path, "rb") as handle:
            data = handle.read()
        return self.load_sound_from_bytes(data)

    def load_sound_from_bytes(self, data: bytes) -> Sound:
        """Register audio data and return its handle."""
        sound_id = self._next_id
        self._sounds[sound_id] = _SoundState(bytes(data))
        self._next_id += 1
        return Sound(sound_id)

    def _state(self, sound: Sound) -> _SoundState:
        try:
            return self._sounds[sound.id]
        except KeyError:
            raise UnknownSoundError(sound) from None

    def play_sound_once(self, sound: Sound) -> None:
        """Play the sound a single time at full volume."""
        self.play_sound(sound, PlaySoundParams(looped=False, volume=1.0))

    def play_sound(self, sound: Sound, params: PlaySoundParams) -> None:
        state = self._state(sound)
        state.playing = True
        state.looped = params.looped
        state.volume = params.volume

    def stop_sound(self, sound: Sound) -> None:
        self._state(sound).playing = False

    def set_sound_volume(self, sound: Sound, volume: float) -> None:
        self._state(sound).volume = volume

    def is_playing(self, sound: Sound) -> bool:
        return self._state(sound).playing

    def is_looped(self, sound: Sound) -> bool:
        return self._state(sound).looped

    def volume(self, sound: Sound) -> float:
        return self._state(sound).volume

    def data(self, sound: Sound) -> bytes:
        """The raw audio data the sound was loaded from."""
        return self._state(sound).data