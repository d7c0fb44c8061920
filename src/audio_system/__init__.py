"""
Audio System Module

Provides tone synthesis and playback for the Simon memory game.
"""

from .synth import tone_pcm
from .tone_player import TonePlayer
from .mock_tone_player import MockTonePlayer

__all__ = [
    'tone_pcm',
    'TonePlayer',
    'MockTonePlayer'
]
