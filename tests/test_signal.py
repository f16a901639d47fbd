# tests/test_signal.py
import numpy as np
import pytest

from rfsim_signal.signal import (
    IncompatibleSignalWindow, IncompatibleSpectrum, Signal, StructuralMismatchError,
    below_at_channel, below_at_frequency, below_everywhere, offset_by_time,
)
from rfsim_signal.spectrum import SPECTRUM_80211, SlotIndexError
from rfsim_signal.spectrum.itsg5 import CCH

from conftest import DUMMY_CH1, DUMMY_CH2, DUMMY_SPECTRUM, DummySlot, dummy_signal


class TestSignalConstruction:

    def test_zero_initialized_by_default(self):
        sig = Signal(DUMMY_SPECTRUM, 1.0, 2.0)
        np.testing.assert_array_equal(sig.power_levels, np.zeros(6))
        assert sig.start_time == 1.0
        assert sig.end_time == 3.0
        assert sig.duration == 2.0
        assert len(sig) == 6

    def test_power_levels_are_copied(self):
        levels = np.array([1.0, 2, 3, 4, 5, 6])
        sig = dummy_signal(levels)
        levels[0] = 100
        assert sig[DummySlot.F1] == 1.0

    def test_copy_has_value_semantics(self):
        sig = dummy_signal([1, 2, 3, 4, 5, 6])
        dup = sig.copy()
        dup[DummySlot.F1] = 42
        assert sig[DummySlot.F1] == 1
        assert dup == dummy_signal([42, 2, 3, 4, 5, 6])

    def test_wrong_number_of_power_levels(self):
        with pytest.raises(ValueError, match="6 slots"):
            dummy_signal([1, 2, 3])

    def test_negative_duration_is_rejected(self):
        with pytest.raises(ValueError):
            Signal(DUMMY_SPECTRUM, 5.0, -1.0)

    def test_offset_by_time(self):
        sig = dummy_signal([1, 2, 3, 4, 5, 6], start_time=1.0, duration=2.0)
        shifted = offset_by_time(sig, 0.5)
        assert shifted.window == (1.5, 3.5)
        np.testing.assert_array_equal(shifted.power_levels, sig.power_levels)
        assert sig.window == (1.0, 3.0)


class TestOperatorsOnTwoSignals:
    """Two identical signals (1, 1, 1, 0, 0, 0) on a dummy 6-slot spectrum."""

    @pytest.fixture
    def sig_a(self):
        return dummy_signal([1, 1, 1, 0, 0, 0])

    @pytest.fixture
    def sig_b(self):
        return dummy_signal([1, 1, 1, 0, 0, 0])

    def test_identical_signals_compare_equal(self, sig_a, sig_b):
        assert sig_a == sig_b

    def test_sum(self, sig_a, sig_b):
        np.testing.assert_array_equal((sig_a + sig_b).power_levels, [2, 2, 2, 0, 0, 0])

    def test_difference(self, sig_a, sig_b):
        np.testing.assert_array_equal((sig_a - sig_b).power_levels, np.zeros(6))

    def test_product(self, sig_a, sig_b):
        np.testing.assert_array_equal((sig_a * sig_b).power_levels, [1, 1, 1, 0, 0, 0])

    def test_quotient_is_one_or_nan(self, sig_a, sig_b):
        quot = sig_a / sig_b
        np.testing.assert_array_equal(quot.power_levels, [1, 1, 1, np.nan, np.nan, np.nan])

    def test_value_operators_leave_operands_untouched(self, sig_a, sig_b):
        _ = sig_a + sig_b
        assert sig_a == dummy_signal([1, 1, 1, 0, 0, 0])

    def test_inplace_operators_mutate_lhs(self, sig_a, sig_b):
        original = sig_a
        sig_a += sig_b
        assert sig_a is original
        np.testing.assert_array_equal(sig_a.power_levels, [2, 2, 2, 0, 0, 0])
        sig_a *= sig_b
        np.testing.assert_array_equal(sig_a.power_levels, [2, 2, 2, 0, 0, 0])
        sig_a -= sig_b
        np.testing.assert_array_equal(sig_a.power_levels, [1, 1, 1, 0, 0, 0])
        sig_a /= sig_b
        np.testing.assert_array_equal(sig_a.power_levels, [1, 1, 1, np.nan, np.nan, np.nan])


class TestOperatorsOnSignalAndScalar:
    """A signal (2, 4, 6, 8, 10, 12) and a scalar 2."""

    @pytest.fixture
    def sig(self):
        return dummy_signal([2, 4, 6, 8, 10, 12])

    def test_scalar_operations(self, sig):
        levels = sig.power_levels.copy()
        np.testing.assert_allclose((sig + 2).power_levels, levels + 2)
        np.testing.assert_allclose((sig - 2).power_levels, levels - 2)
        np.testing.assert_allclose((sig * 2).power_levels, levels * 2)
        np.testing.assert_allclose((sig / 2).power_levels, levels / 2)

    def test_reflected_scalar_operations(self, sig):
        levels = sig.power_levels.copy()
        np.testing.assert_allclose((2 + sig).power_levels, 2 + levels)
        np.testing.assert_allclose((20 - sig).power_levels, 20 - levels)
        np.testing.assert_allclose((2 * sig).power_levels, 2 * levels)
        np.testing.assert_allclose((24 / sig).power_levels, 24 / levels)

    def test_numpy_scalars_defer_to_signal(self, sig):
        result = np.float64(2.0) * sig
        assert isinstance(result, Signal)
        np.testing.assert_allclose(result.power_levels, [4, 8, 12, 16, 20, 24])

    def test_scalar_operations_ignore_the_time_window(self):
        sig = dummy_signal([1, 1, 1, 1, 1, 1], start_time=3.0, duration=0.5)
        result = sig + 1
        assert result.window == (3.0, 3.5)

    def test_division_by_zero_follows_ieee(self, sig):
        quot = dummy_signal([1, -1, 0, 0, 0, 0]) / 0
        assert quot[DummySlot.F1] == np.inf
        assert quot[DummySlot.F2] == -np.inf
        assert np.isnan(quot[DummySlot.F3])

    def test_unsupported_operand(self, sig):
        with pytest.raises(TypeError):
            sig + "1"


class TestStructuralMismatch:

    def test_different_start_time(self):
        a = dummy_signal([1] * 6, start_time=0.0, duration=5.0)
        b = dummy_signal([1] * 6, start_time=1.0, duration=5.0)
        with pytest.raises(IncompatibleSignalWindow) as excinfo:
            a + b
        assert isinstance(excinfo.value, StructuralMismatchError)
        assert isinstance(excinfo.value, ValueError)
        assert "Structural Signal Mismatch" in excinfo.value.get_diagnostic_report()

    def test_different_duration(self):
        a = dummy_signal([1] * 6, duration=5.0)
        b = dummy_signal([1] * 6, duration=4.0)
        for op in (lambda: a - b, lambda: a * b, lambda: a / b):
            with pytest.raises(IncompatibleSignalWindow):
                op()

    def test_failed_inplace_operation_leaves_lhs_unchanged(self):
        a = dummy_signal([1] * 6, duration=5.0)
        b = dummy_signal([1] * 6, duration=4.0)
        with pytest.raises(IncompatibleSignalWindow):
            a += b
        np.testing.assert_array_equal(a.power_levels, np.ones(6))

    def test_different_spectrum(self):
        a = dummy_signal([1] * 6)
        b = Signal(SPECTRUM_80211, 0.0, 5.0)
        with pytest.raises(IncompatibleSpectrum, match="DummySpectrum"):
            a + b

    def test_channel_of_another_spectrum(self):
        with pytest.raises(IncompatibleSpectrum):
            dummy_signal([1] * 6).channel(CCH)

    def test_details_is_part_of_the_mismatch_contract(self):
        assert "details" in StructuralMismatchError.__abstractmethods__
        assert not IncompatibleSignalWindow.__abstractmethods__
        assert not IncompatibleSpectrum.__abstractmethods__


class TestAlgebraicLaws:

    @pytest.fixture
    def rng(self):
        return np.random.default_rng(2018)

    def test_laws_hold_for_random_signals(self, rng):
        for _ in range(25):
            a, b, c = (dummy_signal(rng.uniform(-1e3, 1e3, 6)) for _ in range(3))
            s = float(rng.uniform(-10, 10))
            assert a + b == b + a
            assert ((a + b) + c).isclose(a + (b + c))
            assert a + 0 == a
            assert a * 1 == a
            assert ((a + s) - s).isclose(a, rtol=1e-9, atol=1e-9)

    def test_self_division(self):
        a = dummy_signal([3.0, 0.0, -2.0, 0.0, 1e-300, 7.0])
        quot = a / a
        np.testing.assert_array_equal(quot.power_levels, [1, np.nan, 1, np.nan, 1, 1])


class TestEquality:

    def test_windows_must_match(self):
        assert dummy_signal([1] * 6, start_time=0.0) != dummy_signal([1] * 6, start_time=1.0)

    def test_nan_never_compares_equal(self):
        sig = dummy_signal([np.nan, 0, 0, 0, 0, 0])
        assert sig != sig.copy()
        assert sig.isclose(sig.copy())

    def test_tolerance_comparison(self):
        a = dummy_signal([1.0] * 6)
        b = dummy_signal([1.0 + 1e-12] * 6)
        assert a != b
        assert a.isclose(b)
        assert not a.isclose(dummy_signal([1.1] * 6))

    def test_signals_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(dummy_signal([0] * 6))


class TestSlotAccess:

    def test_read_and_write_by_slot(self):
        sig = dummy_signal([0] * 6)
        sig[DummySlot.F3] = 7.5
        assert sig.at(DummySlot.F3) == 7.5
        assert sig[2] == 7.5

    def test_invalid_slot(self):
        sig = dummy_signal([0] * 6)
        with pytest.raises(SlotIndexError):
            sig.at(6)
        with pytest.raises(SlotIndexError):
            sig[6] = 1.0


class TestThresholdPredicates:

    @pytest.fixture
    def active_ch1(self):
        """Channel 1 active at powerlevel 100, channel 2 passive."""
        return dummy_signal([100, 100, 100, 0, 0, 0])

    @pytest.fixture
    def triangle(self):
        return dummy_signal([50, 100, 50, 0, 0, 0])

    def test_threshold_above_everything(self, active_ch1):
        assert below_at_frequency(active_ch1, DummySlot.F1, 120)
        assert below_at_channel(active_ch1, DUMMY_CH1, 120)
        assert below_at_frequency(active_ch1, DummySlot.F4, 120)
        assert below_at_channel(active_ch1, DUMMY_CH2, 120)
        assert below_everywhere(active_ch1, 120)

    def test_threshold_below_active_channel(self, active_ch1):
        assert not below_at_frequency(active_ch1, DummySlot.F1, 80)
        assert not below_at_channel(active_ch1, DUMMY_CH1, 80)
        assert below_at_frequency(active_ch1, DummySlot.F4, 80)
        assert below_at_channel(active_ch1, DUMMY_CH2, 80)
        assert not below_everywhere(active_ch1, 80)

    def test_triangle_against_75(self, triangle):
        assert not below_everywhere(triangle, 75)
        assert not below_at_channel(triangle, DUMMY_CH1, 75)
        assert not below_at_frequency(triangle, DummySlot.F2, 75)
        assert below_at_channel(triangle, DUMMY_CH2, 75)
        assert below_at_frequency(triangle, DummySlot.F1, 75)
        assert below_at_frequency(triangle, DummySlot.F3, 75)

    def test_triangle_below_120(self, triangle):
        assert below_everywhere(triangle, 120)

    def test_threshold_equal_to_power(self):
        # "everywhere" only fails on power strictly above the threshold,
        # the frequency and channel checks require power strictly below it.
        sig = dummy_signal([75, 75, 75, 0, 0, 0])
        assert below_everywhere(sig, 75)
        assert not below_at_channel(sig, DUMMY_CH1, 75)
        assert not below_at_frequency(sig, DummySlot.F1, 75)
