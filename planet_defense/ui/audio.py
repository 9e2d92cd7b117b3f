"""
Audio manager for Planet Defense.

The only sound is the impact cue played on every hit: a square wave
sweeping from 300 Hz down to 50 Hz while its gain falls away over
0.3 s.  It is synthesised at start-up, so no sound files are needed.
Playback degrades to silence when the mixer is unavailable.
"""

from __future__ import annotations

import logging
import os
from array import array
from dataclasses import dataclass, field
from typing import Any

from planet_defense.config import (
    IMPACT_DURATION,
    IMPACT_FREQ_END,
    IMPACT_FREQ_START,
    IMPACT_GAIN_END,
    IMPACT_GAIN_START,
    SAMPLE_RATE,
)

log = logging.getLogger(__name__)


def impact_samples(
    sample_rate: int = SAMPLE_RATE,
    duration: float = IMPACT_DURATION,
    freq_start: float = IMPACT_FREQ_START,
    freq_end: float = IMPACT_FREQ_END,
    gain_start: float = IMPACT_GAIN_START,
    gain_end: float = IMPACT_GAIN_END,
) -> list[float]:
    """Return the impact cue as floats in ``[-1, 1]``.

    Frequency and gain both ramp exponentially.  The phase is
    accumulated sample by sample so the sweep stays continuous.
    """
    total = max(1, int(sample_rate * duration))
    freq_ratio = freq_end / freq_start
    gain_ratio = gain_end / gain_start
    samples: list[float] = []
    phase = 0.0
    for i in range(total):
        t = i / total
        freq = freq_start * freq_ratio ** t
        gain = gain_start * gain_ratio ** t
        phase = (phase + freq / sample_rate) % 1.0
        samples.append(gain if phase < 0.5 else -gain)
    return samples


def encode_samples(samples: list[float], size: int, channels: int) -> bytes:
    """Pack float samples for a mixer initialised with *size* / *channels*.

    *size* is pygame's format value: 8 for unsigned 8-bit, -16 / 16 for
    16-bit.  Each sample is duplicated across *channels*.
    """
    channels = max(1, channels)
    if abs(size) == 8:
        buf = array("B")
        for s in samples:
            buf.extend([int(128 + s * 127)] * channels)
        return buf.tobytes()
    buf16 = array("h")
    for s in samples:
        buf16.extend([int(s * 32767)] * channels)
    return buf16.tobytes()


@dataclass
class AudioManager:
    """Audio sink: plays the impact cue, never raises into the game.

    Falls back to silent operation when the mixer cannot be opened.
    """

    enabled: bool = True

    # Internal state
    _initialized: bool = field(default=False, repr=False)
    _impact: Any = field(default=None, repr=False)

    @property
    def available(self) -> bool:
        return self._initialized and self._impact is not None

    def init(self) -> bool:
        """Open the mixer and synthesise the impact cue.

        Returns True if sound is available.  When running inside a
        virtual environment the default SDL audio driver may not be
        detected, so a few common drivers are tried in turn.
        """
        if not self.enabled:
            return False

        try:
            import pygame.mixer
        except ImportError:
            log.debug("pygame.mixer unavailable; audio disabled")
            return False

        if not pygame.mixer.get_init():
            drivers = [None, "pulseaudio", "alsa", "dsp", "dummy"]
            original_driver = os.environ.get("SDL_AUDIODRIVER")
            for driver in drivers:
                try:
                    if driver is not None:
                        os.environ["SDL_AUDIODRIVER"] = driver
                    pygame.mixer.init(SAMPLE_RATE, -16, 1, 256)
                    break
                except Exception as exc:
                    log.debug("audio driver %s failed: %s", driver, exc)
            else:
                if original_driver is not None:
                    os.environ["SDL_AUDIODRIVER"] = original_driver
                elif "SDL_AUDIODRIVER" in os.environ:
                    del os.environ["SDL_AUDIODRIVER"]
                log.info("no audio driver available; playing silently")
                return False
        self._initialized = True

        try:
            freq, size, channels = pygame.mixer.get_init()
            raw = encode_samples(impact_samples(sample_rate=freq), size, channels)
            self._impact = pygame.mixer.Sound(buffer=raw)
        except Exception as exc:
            log.debug("could not build impact cue: %s", exc)
            self._impact = None
        return self.available

    def play_impact(self) -> None:
        """Fire-and-forget impact cue."""
        if not self.enabled or not self.available:
            return
        try:
            self._impact.play()
        except Exception as exc:
            log.debug("impact cue failed: %s", exc)

    def shutdown(self) -> None:
        """Release mixer resources."""
        if self._initialized:
            try:
                import pygame.mixer
                pygame.mixer.quit()
            except Exception as exc:
                log.debug("mixer shutdown failed: %s", exc)
            self._initialized = False
            self._impact = None
