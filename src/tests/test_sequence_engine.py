"""Tests for memory_game.sequence_engine: sequence growth and prefix checking."""

from collections import Counter

import pytest

from memory_game.sequence_engine import (
    CheckOutcome,
    RandomSignalSource,
    ScriptedSignalSource,
    SequenceEngine,
)


def engine_with(signals):
    engine = SequenceEngine(signal_source=ScriptedSignalSource(signals))
    for _ in signals:
        engine.append_random_signal()
    return engine


# ---------------------------------------------------------------------------
# append_random_signal / reset
# ---------------------------------------------------------------------------


class TestAppend:

    def test_append_grows_by_one_and_keeps_prefix(self):
        engine = SequenceEngine(signal_source=ScriptedSignalSource([3, 1, 0, 2]))
        snapshots = []
        for k in range(1, 5):
            engine.append_random_signal()
            assert len(engine) == k
            snapshots.append(engine.sequence)

        for earlier, later in zip(snapshots, snapshots[1:]):
            assert later[:len(earlier)] == earlier

    def test_append_returns_the_new_signal(self):
        engine = SequenceEngine(signal_source=ScriptedSignalSource([2]))
        assert engine.append_random_signal() == 2
        assert engine.sequence == (2,)

    def test_default_source_stays_in_alphabet(self):
        engine = SequenceEngine(signal_count=4)
        for _ in range(200):
            engine.append_random_signal()
        assert set(engine.sequence) <= {0, 1, 2, 3}

    def test_random_source_covers_every_signal(self):
        source = RandomSignalSource(4, seed=1234)
        counts = Counter(source() for _ in range(4000))
        assert set(counts) == {0, 1, 2, 3}
        # Roughly uniform: every signal within 20% of the expected 1000
        assert all(800 < count < 1200 for count in counts.values())

    def test_seeded_sources_repeat(self):
        first = RandomSignalSource(4, seed=7)
        second = RandomSignalSource(4, seed=7)
        assert [first() for _ in range(20)] == [second() for _ in range(20)]

    def test_out_of_range_signal_rejected(self):
        engine = SequenceEngine(signal_source=ScriptedSignalSource([4]))
        with pytest.raises(ValueError, match="expected 0-3"):
            engine.append_random_signal()
        assert len(engine) == 0

    def test_reset_clears_sequence(self):
        engine = engine_with([0, 1])
        engine.reset()
        assert engine.sequence == ()

    def test_sequence_snapshot_unaffected_by_later_appends(self):
        engine = SequenceEngine(signal_source=ScriptedSignalSource([1, 2]))
        engine.append_random_signal()
        snapshot = engine.sequence
        engine.append_random_signal()
        assert snapshot == (1,)
        assert engine.sequence == (1, 2)

    def test_invalid_signal_count(self):
        with pytest.raises(ValueError):
            SequenceEngine(signal_count=0)

    def test_scripted_source_exhaustion(self):
        source = ScriptedSignalSource([1])
        source()
        assert source.remaining == 0
        with pytest.raises(IndexError):
            source()


# ---------------------------------------------------------------------------
# check_prefix
# ---------------------------------------------------------------------------


class TestCheckPrefix:

    def test_proper_prefix_is_correct(self):
        engine = engine_with([0, 1, 2])
        result = engine.check_prefix([0, 1])
        assert result.outcome is CheckOutcome.CORRECT
        assert result.mismatch_index is None

    def test_empty_input_is_correct(self):
        engine = engine_with([0, 1, 2])
        assert engine.check_prefix([]).outcome is CheckOutcome.CORRECT

    def test_full_match_is_complete(self):
        engine = engine_with([0, 1, 2])
        result = engine.check_prefix([0, 1, 2])
        assert result.is_complete
        assert str(result) == "CompleteMatch"

    def test_mismatch_reports_index(self):
        engine = engine_with([0, 1, 2])
        result = engine.check_prefix([0, 2])
        assert result.outcome is CheckOutcome.INCORRECT
        assert result.mismatch_index == 1
        assert str(result) == "IncorrectAt(1)"

    def test_first_mismatch_wins(self):
        engine = engine_with([0, 1, 2, 3])
        result = engine.check_prefix([3, 3, 3, 3])
        assert result.mismatch_index == 0

    def test_does_not_compare_beyond_mismatch(self):
        engine = engine_with([0, 1, 2])

        class Exploding(int):
            def __ne__(self, other):
                raise AssertionError("compared past the mismatch")

        result = engine.check_prefix([0, 3, Exploding(2)])
        assert result.mismatch_index == 1

    def test_input_longer_than_sequence(self):
        engine = engine_with([0])
        result = engine.check_prefix([0, 0])
        assert result.is_mismatch
        assert result.mismatch_index == 1

    def test_same_length_with_mismatch_is_not_complete(self):
        engine = engine_with([0, 1])
        result = engine.check_prefix([0, 0])
        assert not result.is_complete
        assert result.mismatch_index == 1
