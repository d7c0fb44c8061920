"""
Game system configuration
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class TimingConfig:
    """Delays and playback speed curve, all in milliseconds"""
    start_delay_ms: int = 1000          # start trigger -> first round
    lead_in_ms: int = 500               # round start -> first signal
    next_round_delay_ms: int = 1000     # round complete -> next round
    game_over_reset_ms: int = 500       # game over -> auto reset
    flash_ms: int = 300                 # pad pulse length (presenter)

    # Speed curve: max(min_speed_ms, base_speed_ms - level * speed_step_ms)
    base_speed_ms: int = 800
    min_speed_ms: int = 400
    speed_step_ms: int = 20

    def speed_for_level(self, level: int) -> int:
        """Inter-signal playback delay for a level"""
        return max(self.min_speed_ms, self.base_speed_ms - level * self.speed_step_ms)


@dataclass
class AudioConfig:
    """Tone synthesis configuration"""
    # C5, E5, G5, B5
    tone_frequencies: List[float] = field(default_factory=lambda: [523.25, 659.25, 783.99, 987.77])
    tone_duration_ms: int = 300
    error_frequency: float = 200.0
    error_duration_ms: int = 500
    volume: float = 0.3
    sample_rate: int = 22050
    use_mock: bool = False


def default_key_map() -> Dict[str, int]:
    return {'1': 0, '2': 1, '3': 2, '4': 3}


@dataclass
class GameConfig:
    """Main game system configuration"""

    timing: TimingConfig = field(default_factory=TimingConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)

    # Rules
    signal_count: int = 4
    points_per_level: int = 10

    # Input
    key_map: Dict[str, int] = field(default_factory=default_key_map)

    # Persistence and runtime
    best_score_path: str = "data/simon_best_score.json"
    frame_duration_ms: int = 20  # 50 FPS
    log_dir: str = "logs"
    seed: Optional[int] = None

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.signal_count <= 0:
            raise ValueError(f"Signal count must be positive, got {self.signal_count}")

        if self.points_per_level < 0:
            raise ValueError(f"Points per level must be non-negative, got {self.points_per_level}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        timing = self.timing
        for name in ("start_delay_ms", "lead_in_ms", "next_round_delay_ms", "game_over_reset_ms", "flash_ms"):
            if getattr(timing, name) < 0:
                raise ValueError(f"Timing value {name} must be non-negative, got {getattr(timing, name)}")
        if timing.min_speed_ms <= 0 or timing.base_speed_ms < timing.min_speed_ms:
            raise ValueError(
                f"Speed curve invalid: base={timing.base_speed_ms}ms, min={timing.min_speed_ms}ms"
            )

        if len(self.audio.tone_frequencies) != self.signal_count:
            raise ValueError(
                f"Need one tone per signal: {len(self.audio.tone_frequencies)} tones for {self.signal_count} signals"
            )
        if not (0.0 <= self.audio.volume <= 1.0):
            raise ValueError(f"Audio volume must be 0.0-1.0, got {self.audio.volume}")

        # Key map must cover every signal exactly once
        mapped = sorted(self.key_map.values())
        if mapped != list(range(self.signal_count)):
            raise ValueError(f"Key map must map one key to each signal 0-{self.signal_count - 1}, got {self.key_map}")
        for key in self.key_map:
            if len(key) != 1:
                raise ValueError(f"Key map keys must be single characters, got '{key}'")
