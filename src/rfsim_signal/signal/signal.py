# src/rfsim_signal/signal/signal.py
"""
The `Signal` value type: a time-windowed vector of power levels, one per spectrum slot.

Signals have value semantics. The constructor and `copy()` always duplicate the
power-level vector, while the in-place operators (`+=`, `-=`, `*=`, `/=`) and
analogue-model filters mutate it. Division by zero follows IEEE floating-point
semantics and yields inf or NaN, never an exception.
"""
import logging
import numbers
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ..spectrum.base import SlotLike, Spectrum
from ..spectrum.channels import ChannelGroup, ChannelView
from .exceptions import IncompatibleSignalWindow, IncompatibleSpectrum

logger = logging.getLogger(__name__)

_OPERATOR_SYMBOLS = {
    np.add: "+",
    np.subtract: "-",
    np.multiply: "*",
    np.true_divide: "/",
}


class Signal:
    """
    A signal on a fixed spectrum, active during [start_time, end_time].

    Args:
        spectrum: The spectrum whose slots the power levels refer to.
        start_time: Point in time where the signal begins (simulation seconds).
        duration: Length of the signal; must be non-negative.
        power_levels: One power level per slot. Zero-initialized if omitted.
    """

    # Makes numpy scalars defer to the reflected operators below (e.g. np.float64(2) * signal).
    __array_ufunc__ = None

    def __init__(
        self,
        spectrum: Spectrum,
        start_time: float = 0.0,
        duration: float = 0.0,
        power_levels: Optional[Sequence[float]] = None,
    ):
        if duration < 0:
            raise ValueError(f"Signal duration must be non-negative, got {duration}.")
        self.spectrum: Spectrum = spectrum
        self._start_time = float(start_time)
        self._end_time = float(start_time + duration)

        if power_levels is None:
            self._power_levels = np.zeros(spectrum.num_frequencies, dtype=float)
        else:
            levels = np.array(power_levels, dtype=float)
            if levels.shape != (spectrum.num_frequencies,):
                raise ValueError(
                    f"Spectrum '{spectrum.name}' has {spectrum.num_frequencies} slots, "
                    f"got power levels of shape {levels.shape}."
                )
            self._power_levels = levels

    # --- Time window ---

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def end_time(self) -> float:
        return self._end_time

    @property
    def duration(self) -> float:
        return self._end_time - self._start_time

    @property
    def window(self) -> Tuple[float, float]:
        return (self._start_time, self._end_time)

    # --- Power levels ---

    @property
    def power_levels(self) -> np.ndarray:
        """The backing power-level array. Writes go straight into this signal."""
        return self._power_levels

    def at(self, slot: SlotLike) -> float:
        return float(self._power_levels[self.spectrum.validate_index(slot)])

    def __getitem__(self, slot: SlotLike) -> float:
        return self.at(slot)

    def __setitem__(self, slot: SlotLike, value: float) -> None:
        self._power_levels[self.spectrum.validate_index(slot)] = value

    def __len__(self) -> int:
        return len(self._power_levels)

    def channel(self, group: ChannelGroup) -> ChannelView:
        """A write-through view of this signal's power levels on a channel group."""
        return group.access(self)

    def copy(self) -> "Signal":
        return Signal(self.spectrum, self._start_time, self.duration, self._power_levels)

    # --- Structural preconditions ---

    def require_spectrum(self, spectrum: Spectrum, operation: str = "channel access") -> None:
        if self.spectrum is not spectrum:
            raise IncompatibleSpectrum(
                operation=operation, expected_spectrum=spectrum.name, actual_spectrum=self.spectrum.name
            )

    def _require_compatible(self, other: "Signal", operation: str) -> None:
        other.require_spectrum(self.spectrum, operation)
        if self.window != other.window:
            raise IncompatibleSignalWindow(operation=operation, lhs_window=self.window, rhs_window=other.window)

    # --- Arithmetic ---

    def _operand(self, other, ufunc: Callable) -> Optional[object]:
        if isinstance(other, Signal):
            self._require_compatible(other, _OPERATOR_SYMBOLS[ufunc])
            return other._power_levels
        if isinstance(other, numbers.Real):
            return float(other)
        return None

    def _apply_inplace(self, other, ufunc: Callable):
        operand = self._operand(other, ufunc)
        if operand is None:
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            ufunc(self._power_levels, operand, out=self._power_levels)
        return self

    def _apply(self, other, ufunc: Callable):
        if self._operand(other, ufunc) is None:
            return NotImplemented
        result = self.copy()
        result._apply_inplace(other, ufunc)
        return result

    def _apply_reflected(self, scalar, ufunc: Callable):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        result = self.copy()
        with np.errstate(divide='ignore', invalid='ignore'):
            result._power_levels[:] = ufunc(float(scalar), self._power_levels)
        return result

    def __iadd__(self, other):
        return self._apply_inplace(other, np.add)

    def __isub__(self, other):
        return self._apply_inplace(other, np.subtract)

    def __imul__(self, other):
        return self._apply_inplace(other, np.multiply)

    def __itruediv__(self, other):
        return self._apply_inplace(other, np.true_divide)

    def __add__(self, other):
        return self._apply(other, np.add)

    def __sub__(self, other):
        return self._apply(other, np.subtract)

    def __mul__(self, other):
        return self._apply(other, np.multiply)

    def __truediv__(self, other):
        return self._apply(other, np.true_divide)

    def __radd__(self, other):
        return self._apply_reflected(other, np.add)

    def __rsub__(self, other):
        return self._apply_reflected(other, np.subtract)

    def __rmul__(self, other):
        return self._apply_reflected(other, np.multiply)

    def __rtruediv__(self, other):
        return self._apply_reflected(other, np.true_divide)

    # --- Comparison ---

    def __eq__(self, other):
        """
        Exact equality: same spectrum, same time window and bit-for-bit equal power
        levels. As in IEEE comparison, a NaN power level never equals anything.
        """
        if not isinstance(other, Signal):
            return NotImplemented
        return (
            self.spectrum is other.spectrum
            and self.window == other.window
            and bool(np.array_equal(self._power_levels, other._power_levels))
        )

    __hash__ = None

    def isclose(self, other: "Signal", rtol: float = 1e-9, atol: float = 0.0, equal_nan: bool = True) -> bool:
        """Tolerance-based equality of power levels; spectrum and window must still match exactly."""
        return (
            self.spectrum is other.spectrum
            and self.window == other.window
            and bool(np.allclose(self._power_levels, other._power_levels, rtol=rtol, atol=atol, equal_nan=equal_nan))
        )

    def __repr__(self) -> str:
        return (
            f"Signal(spectrum='{self.spectrum.name}', start_time={self._start_time}, "
            f"end_time={self._end_time}, power_levels={self._power_levels.tolist()})"
        )


def offset_by_time(signal: Signal, offset: float) -> Signal:
    """Returns a copy of `signal` shifted by `offset` in time."""
    return Signal(signal.spectrum, signal.start_time + offset, signal.duration, signal.power_levels)
