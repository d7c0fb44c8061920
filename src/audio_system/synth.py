"""
PCM tone synthesis for pygame.mixer.Sound(buffer=...)
"""

import numpy as np


def tone_pcm(frequency: float,
             duration_ms: int,
             volume: float = 0.3,
             sample_rate: int = 22050,
             channels: int = 1,
             fade_ms: int = 10) -> bytes:
    """
    Render a sine tone as signed 16-bit PCM.

    The tail decays exponentially to 1% so the tone does not click, and a
    short linear fade-in removes the attack click.

    Args:
        frequency: Tone frequency in Hz
        duration_ms: Tone length in milliseconds
        volume: Peak amplitude 0.0-1.0
        sample_rate: Samples per second
        channels: Interleaved channel count, the sample is repeated per channel
        fade_ms: Fade-in length in milliseconds

    Returns:
        Raw interleaved PCM bytes, empty for a zero duration
    """
    if frequency <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency}")
    if channels < 1:
        raise ValueError(f"Channels must be at least 1, got {channels}")

    frames = int(sample_rate * duration_ms / 1000)
    if frames <= 0:
        return b""

    volume = max(0.0, min(1.0, volume))
    fade_frames = max(1, int(sample_rate * fade_ms / 1000))

    i = np.arange(frames, dtype=np.float64)
    # exp(decay * frames) == 0.01 at the last frame
    envelope = np.exp(np.log(0.01) / frames * i) * np.minimum(1.0, i / fade_frames)
    wave = volume * envelope * np.sin(2.0 * np.pi * frequency * i / sample_rate)
    wave_i16 = (wave * 32767).astype(np.int16)

    if channels > 1:
        wave_i16 = np.repeat(wave_i16[:, None], channels, axis=1).ravel()
    return wave_i16.tobytes()
