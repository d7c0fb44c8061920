"""
Tone Player - pygame mixer audio for the four pads and the error buzz
"""

from typing import List

import pygame

from memory_game.config import AudioConfig
from memory_game.interfaces import IAudioPlayer

from .synth import tone_pcm


class TonePlayer(IAudioPlayer):
    """
    Plays synthesized tones through pygame.mixer.

    All sounds are rendered once at startup: one sine tone per signal and
    a lower, longer error tone. No sound files are needed.
    """

    def __init__(self, audio_config: AudioConfig, logger):
        """
        Initialize pygame mixer and render every tone.

        Args:
            audio_config: Frequencies, durations, volume and sample rate
            logger: ClassLogger instance for logging

        Raises:
            pygame.error: If the mixer cannot be initialized
        """
        self.config = audio_config
        self.logger = logger

        self.mixer = pygame.mixer
        self.mixer.pre_init(frequency=audio_config.sample_rate, size=-16, channels=1, buffer=512)
        # Keep the requested format; SDL converts for the device
        self.mixer.init(allowedchanges=0)

        # Mixer may pick different settings than requested
        sample_rate, _, channels = self.mixer.get_init()

        self._tones: List[pygame.mixer.Sound] = [
            self._make_sound(frequency, audio_config.tone_duration_ms, sample_rate, channels)
            for frequency in audio_config.tone_frequencies
        ]
        self._error_tone = self._make_sound(
            audio_config.error_frequency, audio_config.error_duration_ms, sample_rate, channels
        )

        self.logger.info(
            f"🔊 TonePlayer initialized: {len(self._tones)} tones + error tone "
            f"({sample_rate}Hz, {channels} channel(s))"
        )

    def _make_sound(self, frequency: float, duration_ms: int, sample_rate: int, channels: int) -> pygame.mixer.Sound:
        pcm = tone_pcm(
            frequency,
            duration_ms,
            volume=1.0,
            sample_rate=sample_rate,
            channels=channels
        )
        sound = pygame.mixer.Sound(buffer=pcm)
        sound.set_volume(self.config.volume)
        return sound

    def play_tone(self, index: int) -> None:
        """
        Play the tone for a signal.

        Args:
            index: Signal index (0-based)
        """
        if not (0 <= index < len(self._tones)):
            self.logger.warning(f"No tone for signal {index}")
            return
        self._tones[index].play()

    def play_error_tone(self) -> None:
        """Play the mismatch tone"""
        self._error_tone.play()

    def cleanup(self) -> None:
        """Stop all sounds and close the audio device"""
        if self.mixer.get_init():
            self.mixer.stop()
            self.mixer.quit()
            self.logger.info("TonePlayer cleaned up")
