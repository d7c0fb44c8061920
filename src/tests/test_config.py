"""Tests for memory_game.config validation."""

import pytest

from memory_game import GameConfig


def test_defaults_are_valid():
    config = GameConfig()
    config.validate()
    assert config.target_fps == 50.0


@pytest.mark.parametrize("mutate", [
    lambda c: setattr(c, "signal_count", 0),
    lambda c: setattr(c, "frame_duration_ms", 0),
    lambda c: setattr(c.timing, "lead_in_ms", -1),
    lambda c: setattr(c.timing, "min_speed_ms", 900),
    lambda c: setattr(c.audio, "volume", 1.5),
    lambda c: c.audio.tone_frequencies.pop(),
    lambda c: c.key_map.update({'5': 3}),
    lambda c: c.key_map.update({'11': c.key_map.pop('1')}),
])
def test_invalid_configs_rejected(mutate):
    config = GameConfig()
    mutate(config)
    with pytest.raises(ValueError):
        config.validate()
